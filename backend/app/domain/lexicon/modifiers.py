"""Context modifiers: time windows, benchmark comparisons and sentiment."""

from types import MappingProxyType

# Ordered: the first period with a hit becomes the query's timeframe.
TIME_MODIFIERS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "today": (
        "today", "today's", "todays", "intraday", "live", "current", "now", "right now",
    ),
    "yesterday": ("yesterday", "yesterday's", "yesterdays", "previous day", "last trading day"),
    "this_week": ("this week", "current week", "weekly", "week"),
    "last_week": ("last week", "previous week", "past week"),
    "this_month": ("this month", "current month", "monthly", "month", "mtd", "month to date"),
    "last_month": ("last month", "previous month", "past month"),
    "this_quarter": (
        "this quarter", "current quarter", "quarterly", "qtd", "quarter to date", "q1",
        "q2", "q3", "q4",
    ),
    "last_quarter": ("last quarter", "previous quarter", "past quarter"),
    "ytd": ("ytd", "year to date", "this year", "current year", "cy"),
    "1_year": (
        "1 year", "one year", "12 months", "12m", "1y", "past year", "last year",
        "trailing year", "ttm",
    ),
    "3_year": ("3 year", "three year", "3y", "36 months", "3 years"),
    "5_year": ("5 year", "five year", "5y", "60 months", "5 years"),
    "10_year": ("10 year", "ten year", "10y", "decade", "10 years"),
    "52_week": ("52 week", "52w", "52-week", "yearly", "annual"),
    "all_time": ("all time", "alltime", "since inception", "historical", "lifetime"),
})

COMPARISON_MODIFIERS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "vs_nifty": (
        "vs nifty", "versus nifty", "compared to nifty", "relative to nifty",
        "against nifty",
    ),
    "vs_sensex": (
        "vs sensex", "versus sensex", "compared to sensex", "relative to sensex",
        "against sensex",
    ),
    "vs_sector": (
        "vs sector", "versus sector", "compared to sector", "relative to sector",
        "against sector", "sector comparison",
    ),
    "vs_peers": (
        "vs peers", "versus peers", "compared to peers", "relative to peers",
        "against peers", "peer comparison",
    ),
    "vs_industry": (
        "vs industry", "versus industry", "compared to industry",
        "relative to industry", "against industry",
    ),
    "yoy": (
        "yoy", "y-o-y", "year over year", "year on year", "vs last year",
        "compared to last year",
    ),
    "qoq": (
        "qoq", "q-o-q", "quarter over quarter", "quarter on quarter", "vs last quarter",
    ),
    "mom": ("mom", "m-o-m", "month over month", "month on month", "vs last month"),
})

# Ordered bullish, bearish, neutral; the first hit decides the sentiment.
SENTIMENT_PHRASES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "bullish": (
        "bullish", "bullish on", "positive", "positive on", "optimistic", "buy",
        "accumulate", "add", "going up", "upside", "uptrend", "breakout", "strong buy",
        "outperform", "overweight", "conviction buy", "long", "go long",
        "buying opportunity", "attractive", "undervalued",
    ),
    "bearish": (
        "bearish", "bearish on", "negative", "negative on", "pessimistic", "sell",
        "avoid", "exit", "going down", "downside", "downtrend", "breakdown",
        "strong sell", "underperform", "underweight", "reduce", "short", "go short",
        "overvalued", "expensive", "risky",
    ),
    "neutral": (
        "neutral", "neutral on", "hold", "wait", "sideways", "range bound", "no view",
        "on sidelines", "watch", "monitoring", "fair valued",
    ),
})
