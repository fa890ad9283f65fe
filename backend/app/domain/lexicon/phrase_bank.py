"""Phrase bank: every phrasing that should route a query to a set of cards.

Scores are priority-weighted, so longer and higher-priority phrases dominate.
Indian-market terms live in their own table and are merged in last.
"""

from types import MappingProxyType

from app.domain.entities.lexicon import PhraseMapping

INDIAN_MARKET_TERMS: MappingProxyType[str, PhraseMapping] = MappingProxyType({
    "indices": PhraseMapping(
        phrases=(
            "nifty", "nifty 50", "nifty50", "nifty fifty", "nse", "bank nifty",
            "banknifty", "nifty bank", "nifty it", "nifty pharma", "nifty auto",
            "nifty metal", "nifty fmcg", "nifty realty", "nifty midcap",
            "nifty smallcap", "nifty next 50", "nifty 100", "nifty 200", "nifty 500",
            "india vix", "vix", "volatility index", "sensex", "bse", "bse 30",
            "bse sensex", "bse midcap", "bse smallcap", "bse 100", "bse 200", "bse 500",
            "vs nifty", "vs sensex", "beat nifty", "beat sensex", "outperform nifty",
            "outperform sensex", "underperform nifty", "underperform sensex",
            "relative to nifty", "relative to sensex",
        ),
        cards=("peer-comparison", "portfolio-leaderboard"),
        intent="benchmark",
        priority=8,
    ),
    "fno_specific": PhraseMapping(
        phrases=(
            "f&o", "fno", "f and o", "futures and options", "fno ban", "ban list",
            "f&o ban", "security in ban", "ban period", "lot size", "contract size",
            "market lot", "rollover", "roll over", "expiry rollover",
            "monthly rollover", "weekly rollover", "oi spurts", "oi spurt",
            "open interest spurt", "long build up", "short build up", "long unwinding",
            "short covering", "fno stocks", "f&o stocks", "derivative stocks",
            "weekly expiry", "monthly expiry", "expiry day", "expiry week",
            "thursday expiry", "last thursday",
        ),
        cards=("options-interest", "fno-risk-advisor", "options-strategy"),
        intent="derivatives",
        priority=12,
    ),
    "regulatory": PhraseMapping(
        phrases=(
            "sebi", "securities and exchange board", "regulator", "sebi guidelines",
            "sebi norms", "sebi circular", "sebi regulation", "buyback", "buy back",
            "share buyback", "tender offer", "esop", "employee stock option",
            "stock options", "esop grant", "bonus", "bonus issue", "bonus shares",
            "stock bonus", "split", "stock split", "share split", "face value split",
            "rights issue", "rights", "rights offer", "ofs", "offer for sale", "ipo",
            "initial public offering", "new listing", "listing", "fpo",
            "follow on public offer", "promoter pledge", "pledge", "pledged shares",
            "pledge ratio", "unpledge", "pledge release", "pledge creation",
            "bulk deal", "block deal", "insider trade", "sast", "takeover", "delisting",
            "delist", "relisting", "circuit", "circuit breaker", "upper circuit",
            "lower circuit", "circuit limit", "trading halt", "asm", "gsm",
            "surveillance",
        ),
        cards=("insider-trades", "shareholding-pattern", "institutional-flows"),
        intent="regulatory",
        priority=10,
    ),
    "indian_sectors": PhraseMapping(
        phrases=(
            "it sector", "software sector", "tech sector", "information technology",
            "banking sector", "bank stocks", "psu banks", "private banks", "nbfc",
            "pharma sector", "pharmaceutical", "healthcare", "auto sector",
            "automobile", "ev stocks", "electric vehicle", "fmcg sector",
            "consumer goods", "fmcg stocks", "metal sector", "steel stocks", "mining",
            "oil and gas", "energy sector", "power sector", "utilities",
            "realty sector", "real estate", "property", "infra sector",
            "infrastructure", "construction", "cement sector", "building materials",
            "chemical sector", "specialty chemicals", "textile sector", "apparel",
        ),
        cards=("peer-comparison", "narrative-theme"),
        intent="sector",
        priority=8,
    ),
})

PHRASE_BANK: MappingProxyType[str, PhraseMapping] = MappingProxyType({
    "valuation_basic": PhraseMapping(
        phrases=(
            "valuation", "valuation summary", "PE", "P/E", "price to earnings",
            "price to earning", "PB", "P/B", "price to book", "PS", "P/S",
            "price to sales", "EV", "enterprise value", "EV/EBITDA", "EV to EBITDA",
            "EV/EBIT", "EV to EBIT", "EV/Sales", "PEG", "PEG ratio",
            "price earnings growth", "dividend yield", "yield", "dividends",
            "is it overvalued", "is it undervalued", "is it cheap", "is it expensive",
            "fair value", "what is it worth", "how much should it cost",
            "valuation grade", "valuation trends", "historical valuation",
            "relative valuation", "peer valuation", "sector valuation",
            "cheaper than peers", "expensive vs sector", "premium valuation",
            "discount valuation", "valuation percentile", "valuation rank",
        ),
        cards=("valuation-summary", "peer-comparison"),
        intent="valuation",
        priority=10,
    ),
    "dcf_valuation": PhraseMapping(
        phrases=(
            "DCF", "discounted cash flow", "intrinsic value", "fair value calculation",
            "WACC", "weighted average cost of capital", "discount rate",
            "terminal value", "perpetuity growth", "terminal growth rate",
            "margin of safety", "upside potential", "downside risk", "FCF projections",
            "cash flow forecast", "value model", "what should the price be",
            "calculate fair value", "run DCF",
        ),
        cards=("dcf-valuation", "intrinsic-value-range", "fair-value-forecaster"),
        intent="valuation_deep",
        priority=15,
    ),
    "piotroski_quality": PhraseMapping(
        phrases=(
            "Piotroski", "F-score", "F score", "Piotroski score", "fundamental score",
            "quality score", "financial strength", "balance sheet strength",
            "profitability score", "leverage score", "efficiency score",
            "9 point checklist", "fundamental checklist", "is it a quality stock",
            "is it financially strong", "good fundamentals",
        ),
        cards=("piotroski-score", "financial-health-dna", "altman-graham"),
        intent="quality",
        priority=15,
    ),
    "growth_summary": PhraseMapping(
        phrases=(
            "growth", "growth summary", "revenue growth", "sales growth",
            "top line growth", "EPS growth", "earnings growth", "profit growth",
            "bottom line growth", "CAGR", "compound growth", "3 year growth",
            "5 year growth", "10 year growth", "YoY growth", "year over year",
            "QoQ growth", "quarter over quarter", "forward growth", "expected growth",
            "projected growth", "NTM growth", "growth rate", "growth trend",
            "historical growth", "growth trajectory", "is it growing",
            "how fast is it growing", "growth prospects",
        ),
        cards=("growth-summary", "earnings-stability"),
        intent="growth",
        priority=10,
    ),
    "risk_overview": PhraseMapping(
        phrases=(
            "risk", "risks", "risk assessment", "risk analysis", "risk score",
            "how risky", "is it risky", "what are the risks", "risk factors",
            "red flags", "warning signs", "concerns", "issues", "risk health",
            "risk dashboard", "risk summary",
        ),
        cards=("risk-health-dashboard", "warning-sentinel", "financial-stress-radar"),
        intent="risk",
        priority=10,
    ),
    "leverage_debt": PhraseMapping(
        phrases=(
            "leverage", "debt", "debt to equity", "D/E", "debt ratio", "borrowings",
            "loans", "interest coverage", "debt service", "gearing",
            "financial leverage", "debt levels", "debt burden", "how much debt",
            "is debt too high", "debt history", "leverage trend", "net debt",
            "gross debt", "total debt", "low debt", "high debt", "zero debt",
        ),
        cards=("leverage-history", "financial-health-dna", "risk-health-dashboard"),
        intent="leverage",
        priority=12,
    ),
    "technical_basic": PhraseMapping(
        phrases=(
            "technical", "technical analysis", "chart", "charts", "price chart",
            "bullish", "bearish", "neutral", "sideways", "trend", "uptrend",
            "downtrend", "trending", "technical indicators", "indicators", "signals",
            "what does the chart say", "technical view", "chart pattern",
        ),
        cards=("candlestick-hero", "technical-indicators", "trend-strength"),
        intent="technical",
        priority=10,
    ),
    "shareholding": PhraseMapping(
        phrases=(
            "shareholding", "ownership", "who owns", "shareholders", "promoter",
            "promoter holding", "promoter stake", "promoter pledge", "FII",
            "FII holding", "foreign institutional", "FPI", "DII", "DII holding",
            "domestic institutional", "mutual fund holding", "MF holding",
            "insurance holding", "retail", "public holding", "NII", "non-institutional",
            "ownership change", "stake increase", "stake decrease",
        ),
        cards=("shareholding-pattern", "institutional-flows"),
        intent="ownership",
        priority=10,
    ),
    "peer_comparison": PhraseMapping(
        phrases=(
            "compare", "comparison", "vs", "versus", "compare to", "peer", "peers",
            "competitors", "competition", "sector peers", "how does it compare",
            "better than peers", "worse than peers", "relative performance",
            "peer ranking", "sector ranking", "INFY vs TCS", "compare stocks",
        ),
        cards=("peer-comparison", "portfolio-leaderboard"),
        intent="compare",
        priority=10,
    ),
    "options_basic": PhraseMapping(
        phrases=(
            "options", "option", "call option", "put option", "calls", "puts", "strike",
            "strike price", "expiry", "expiry date", "expiration", "premium",
            "option premium", "option price", "ITM", "in the money", "ATM",
            "at the money", "OTM", "out of the money", "option chain", "options data",
            "IV", "implied volatility",
        ),
        cards=("options-interest", "options-strategy", "fno-risk-advisor"),
        intent="derivatives",
        priority=10,
    ),
    "mutual_funds": PhraseMapping(
        phrases=(
            "mutual fund", "MF", "fund", "scheme", "NAV", "net asset value", "AUM",
            "assets under management", "expense ratio", "TER", "total expense ratio",
            "fund manager", "AMC", "fund house", "SIP", "systematic investment",
            "lumpsum", "which fund", "best fund", "fund comparison", "fund vs fund",
        ),
        cards=("mf-analyzer", "mf-explorer", "mf-portfolio-optimizer"),
        intent="mutual_funds",
        priority=10,
    ),
    "dividends": PhraseMapping(
        phrases=(
            "dividend", "dividends", "dividend yield", "DPS", "dividend per share",
            "payout ratio", "dividend payout", "dividend growth", "dividend history",
            "dividend track record", "dividend consistency", "income stock",
            "dividend stock", "yield stock", "high dividend",
        ),
        cards=("dividend-crystal-ball", "income-stability", "dividend-sip-tracker"),
        intent="income",
        priority=10,
    ),
    "cashflow": PhraseMapping(
        phrases=(
            "cash flow", "cashflow", "cash flows", "FCF", "free cash flow",
            "operating cash flow", "OCF", "CFO", "cash from operations",
            "cash generation", "cash burn", "cash positive", "cash negative",
        ),
        cards=("fcf-health", "cash-conversion-earnings", "cashflow-stability-index"),
        intent="cashflow",
        priority=10,
    ),
    **INDIAN_MARKET_TERMS,
})
