"""Screenable financial metrics with every alias traders use for them."""

from app.domain.entities.lexicon import MetricDefinition


def _metric(
    id: str,
    display_name: str,
    aliases: list[str],
    category: str,
    default_operator: str,
    unit: str | None = None,
    higher_is_better: bool | None = None,
) -> MetricDefinition:
    return MetricDefinition(
        id=id,
        display_name=display_name,
        aliases=tuple(aliases),
        category=category,
        default_operator=default_operator,
        unit=unit,
        higher_is_better=higher_is_better,
    )


METRICS: tuple[MetricDefinition, ...] = (
    # Valuation
    _metric("pe_ratio", "P/E Ratio", ["pe", "p/e", "price to earnings", "price to earning", "price earning", "price-to-earnings", "pe ratio", "per"], "valuation", "<", higher_is_better=False),
    _metric("pb_ratio", "P/B Ratio", ["pb", "p/b", "price to book", "price book", "price-to-book", "pb ratio", "pbr"], "valuation", "<", higher_is_better=False),
    _metric("ps_ratio", "P/S Ratio", ["ps", "p/s", "price to sales", "price sales", "price-to-sales", "ps ratio", "psr"], "valuation", "<", higher_is_better=False),
    _metric("ev_ebitda", "EV/EBITDA", ["ev/ebitda", "ev to ebitda", "enterprise value to ebitda", "ev ebitda"], "valuation", "<", higher_is_better=False),
    _metric("ev_ebit", "EV/EBIT", ["ev/ebit", "ev to ebit", "enterprise value to ebit", "ev ebit"], "valuation", "<", higher_is_better=False),
    _metric("peg_ratio", "PEG Ratio", ["peg", "price earnings growth", "pe to growth", "peg ratio"], "valuation", "<", higher_is_better=False),
    _metric("dividend_yield", "Dividend Yield", ["dividend yield", "yield", "div yield", "dy", "dividend %"], "valuation", ">", unit="%", higher_is_better=True),
    _metric("market_cap", "Market Cap", ["market cap", "mcap", "market capitalization", "m cap", "marketcap"], "valuation", ">", unit="Cr"),

    # Profitability
    _metric("roe", "ROE", ["roe", "return on equity", "return on equities"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("roa", "ROA", ["roa", "return on assets", "return on asset"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("roce", "ROCE", ["roce", "return on capital employed", "return on capital"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("roic", "ROIC", ["roic", "return on invested capital"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("net_margin", "Net Profit Margin", ["net margin", "net profit margin", "npm", "pat margin", "profit margin"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("operating_margin", "Operating Margin", ["operating margin", "opm", "ebit margin", "operating profit margin"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("gross_margin", "Gross Margin", ["gross margin", "gpm", "gross profit margin"], "profitability", ">", unit="%", higher_is_better=True),
    _metric("ebitda_margin", "EBITDA Margin", ["ebitda margin", "ebitda %"], "profitability", ">", unit="%", higher_is_better=True),

    # Growth
    _metric("revenue_growth", "Revenue Growth", ["revenue growth", "sales growth", "topline growth", "top line growth", "revenue cagr"], "growth", ">", unit="%", higher_is_better=True),
    _metric("eps_growth", "EPS Growth", ["eps growth", "earnings growth", "profit growth", "earnings per share growth"], "growth", ">", unit="%", higher_is_better=True),
    _metric("pat_growth", "PAT Growth", ["pat growth", "net profit growth", "profit after tax growth", "bottomline growth"], "growth", ">", unit="%", higher_is_better=True),
    _metric("cagr_3y", "3Y CAGR", ["3y cagr", "3 year cagr", "three year cagr", "3yr cagr"], "growth", ">", unit="%", higher_is_better=True),
    _metric("cagr_5y", "5Y CAGR", ["5y cagr", "5 year cagr", "five year cagr", "5yr cagr"], "growth", ">", unit="%", higher_is_better=True),

    # Risk & leverage
    _metric("debt_to_equity", "Debt to Equity", ["debt to equity", "d/e", "de ratio", "debt equity", "d-e", "leverage ratio", "de"], "leverage", "<", higher_is_better=False),
    _metric("debt_to_assets", "Debt to Assets", ["debt to assets", "d/a", "debt assets"], "leverage", "<", higher_is_better=False),
    _metric("interest_coverage", "Interest Coverage", ["interest coverage", "icr", "interest coverage ratio", "times interest earned"], "leverage", ">", higher_is_better=True),
    _metric("current_ratio", "Current Ratio", ["current ratio", "cr", "working capital ratio"], "liquidity", ">", higher_is_better=True),
    _metric("quick_ratio", "Quick Ratio", ["quick ratio", "acid test", "acid test ratio"], "liquidity", ">", higher_is_better=True),
    _metric("beta", "Beta", ["beta", "market beta", "stock beta"], "risk", "<", higher_is_better=False),
    _metric("volatility", "Volatility", ["volatility", "vol", "standard deviation", "std dev"], "risk", "<", unit="%", higher_is_better=False),

    # Technical
    _metric("rsi", "RSI", ["rsi", "relative strength index", "relative strength"], "technical", "between"),
    _metric("macd", "MACD", ["macd", "moving average convergence divergence"], "technical", ">"),
    _metric("adx", "ADX", ["adx", "average directional index", "trend strength"], "technical", ">"),
    _metric("52w_high", "52W High", ["52 week high", "52w high", "52wh", "yearly high", "1 year high"], "technical", "<", unit="%"),
    _metric("52w_low", "52W Low", ["52 week low", "52w low", "52wl", "yearly low", "1 year low"], "technical", ">", unit="%"),

    # Ownership
    _metric("promoter_holding", "Promoter Holding", ["promoter holding", "promoter stake", "promoter %", "promoter ownership"], "ownership", ">", unit="%", higher_is_better=True),
    _metric("fii_holding", "FII Holding", ["fii holding", "fii stake", "fii %", "foreign holding", "fpi holding"], "ownership", ">", unit="%"),
    _metric("dii_holding", "DII Holding", ["dii holding", "dii stake", "dii %", "domestic holding", "mf holding"], "ownership", ">", unit="%"),
    _metric("pledge", "Promoter Pledge", ["pledge", "promoter pledge", "pledged shares", "pledge %", "pledged"], "ownership", "<", unit="%", higher_is_better=False),

    # Quality scores
    _metric("piotroski_score", "Piotroski Score", ["piotroski", "f score", "f-score", "piotroski score", "fscore"], "quality", ">=", higher_is_better=True),
    _metric("altman_z", "Altman Z-Score", ["altman z", "z score", "z-score", "altman score", "altman"], "quality", ">", higher_is_better=True),

    # Cashflow
    _metric("fcf_yield", "FCF Yield", ["fcf yield", "free cash flow yield", "fcf %"], "cashflow", ">", unit="%", higher_is_better=True),
    _metric("ocf", "Operating Cash Flow", ["ocf", "operating cash flow", "cfo", "cash from operations"], "cashflow", ">", unit="Cr", higher_is_better=True),

    # Dividend
    _metric("payout_ratio", "Payout Ratio", ["payout ratio", "dividend payout", "payout %", "dividend payout ratio"], "dividend", "<", unit="%", higher_is_better=False),
    _metric("dividend_cagr", "Dividend CAGR", ["dividend cagr", "dividend growth", "dps growth", "dividend per share growth"], "dividend", ">", unit="%", higher_is_better=True),
)

METRICS_BY_ID: dict[str, MetricDefinition] = {m.id: m for m in METRICS}

# Adjectives that ask for the high or low end of a metric ("strong roe").
QUALITY_ADJECTIVES: tuple[str, ...] = ("high", "low", "good", "strong", "weak")
HIGH_QUALITY_ADJECTIVES: frozenset[str] = frozenset({"high", "good", "strong"})


def find_metric_exact(text: str) -> MetricDefinition | None:
    """Resolve metric text by exact id, display name or alias (case-insensitive)."""
    needle = text.strip().lower()
    if not needle:
        return None
    for metric in METRICS:
        if metric.id == needle or needle in metric.names():
            return metric
    return None


def find_metric_containing(text: str) -> MetricDefinition | None:
    """Resolve metric text by substring of a display name or alias.

    Looser than :func:`find_metric_exact`; the first metric in table order wins.
    """
    needle = text.strip().lower()
    if not needle:
        return None
    for metric in METRICS:
        if any(needle in name for name in metric.names()):
            return metric
    return None
