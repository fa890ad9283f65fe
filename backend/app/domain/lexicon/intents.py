"""Intent clusters and structural query patterns used for tool routing."""

import re
from types import MappingProxyType

from app.domain.entities.lexicon import IntentCluster, QueryPattern

INTENT_CLUSTERS: MappingProxyType[str, IntentCluster] = MappingProxyType({
    # Risk Management
    "risk_sizing": IntentCluster(
        terms=(
            "position size", "position sizing", "bet size", "lot size", "quantity",
            "risk per trade", "capital at risk", "exposure", "leverage", "stop loss",
            "trailing stop", "atr stop", "risk management", "max loss",
            "daily loss limit", "drawdown",
        ),
        tools=("fno-risk-advisor", "risk-health-dashboard", "trade-expectancy"),
        priority=1,
    ),
    # F&O / Derivatives
    "options_trading": IntentCluster(
        terms=(
            "options", "call", "put", "ce", "pe", "strike", "expiry", "weekly expiry",
            "monthly expiry", "oi", "open interest", "iv", "implied volatility", "pcr",
            "max pain", "greeks", "delta", "gamma", "theta", "vega", "straddle",
            "strangle", "iron condor", "spread", "long buildup", "short covering",
        ),
        tools=("options-strategy", "fno-risk-advisor"),
        priority=1,
    ),
    # Technical Analysis - Patterns
    "chart_patterns": IntentCluster(
        terms=(
            "pattern", "head and shoulders", "double top", "double bottom",
            "cup and handle", "flag", "pennant", "wedge", "triangle", "breakout",
            "breakdown", "fakeout", "support", "resistance", "trendline", "channel",
        ),
        tools=("pattern-matcher", "price-structure", "candlestick-hero"),
        priority=2,
    ),
    # Technical Analysis - Candlesticks
    "candlestick_patterns": IntentCluster(
        terms=(
            "candlestick", "candle", "doji", "hammer", "engulfing", "harami",
            "morning star", "evening star", "shooting star", "marubozu", "pin bar",
            "inside bar", "outside bar",
        ),
        tools=("candlestick-hero", "pattern-matcher"),
        priority=2,
    ),
    # Technical Analysis - Indicators
    "technical_indicators": IntentCluster(
        terms=(
            "rsi", "macd", "stochastic", "bollinger", "atr", "adx", "cci", "williams",
            "momentum", "oscillator", "overbought", "oversold", "divergence",
        ),
        tools=("technical-indicators", "momentum-heatmap", "volatility-regime"),
        priority=2,
    ),
    # Moving Averages & Trend
    "trend_analysis": IntentCluster(
        terms=(
            "moving average", "ema", "sma", "golden cross", "death cross", "trend",
            "uptrend", "downtrend", "trend strength", "adx", "supertrend",
            "trend following",
        ),
        tools=("trend-strength", "technical-indicators", "market-regime-radar"),
        priority=2,
    ),
    # Volume Analysis
    "volume_analysis": IntentCluster(
        terms=(
            "volume", "vwap", "volume profile", "obv", "accumulation", "distribution",
            "delivery", "smart money", "institutional", "bulk deal", "block deal",
            "volume spike",
        ),
        tools=("delivery-analysis", "trade-flow-intel"),
        priority=2,
    ),
    # Pivot & Intraday Levels
    "intraday_levels": IntentCluster(
        terms=(
            "pivot", "cpr", "floor pivot", "camarilla", "pdh", "pdl",
            "previous day high", "previous day low", "opening range", "orb", "day high",
            "day low", "support", "resistance",
        ),
        tools=("price-structure", "playbook-builder"),
        priority=2,
    ),
    # Market Regime & Context
    "market_regime": IntentCluster(
        terms=(
            "regime", "bull market", "bear market", "sideways", "volatility regime",
            "risk on", "risk off", "sector rotation", "market condition", "choppy",
            "trending",
        ),
        tools=("market-regime-radar", "volatility-regime"),
        priority=3,
    ),
    # Trade Performance & Statistics
    "trade_statistics": IntentCluster(
        terms=(
            "win rate", "profit factor", "expectancy", "r multiple", "sharpe ratio",
            "sortino", "drawdown", "pnl", "performance", "backtest", "equity curve",
            "cagr",
        ),
        tools=("trade-expectancy", "trade-journal", "drawdown-var"),
        priority=2,
    ),
    # Trading Psychology & Behavior
    "trading_psychology": IntentCluster(
        terms=(
            "journal", "discipline", "overtrading", "revenge trading", "fomo",
            "psychology", "behavior", "bias", "emotion", "plan adherence",
            "rule violation",
        ),
        tools=("trade-journal", "playbook-builder"),
        priority=3,
    ),
    # Indian Market Specific
    "indian_market": IntentCluster(
        terms=(
            "nifty", "bank nifty", "sensex", "fii", "dii", "stt", "stamp duty", "gst",
            "brokerage", "mis", "cnc", "nrml", "demat", "sebi",
        ),
        tools=("fno-risk-advisor", "trade-expectancy", "narrative-theme"),
        priority=1,
    ),
    # Sector & Theme Analysis
    "sector_themes": IntentCluster(
        terms=(
            "sector", "theme", "psu", "defence", "railway", "it", "pharma", "bank",
            "auto", "fmcg", "metal", "realty", "rotation", "leader", "laggard",
        ),
        tools=("narrative-theme",),
        priority=3,
    ),
    # Fundamental Analysis
    "fundamental_analysis": IntentCluster(
        terms=(
            "pe", "pb", "eps", "roe", "roce", "margin", "growth", "revenue", "profit",
            "dividend", "valuation", "dcf", "intrinsic value", "fair value",
            "piotroski", "altman",
        ),
        tools=(
            "valuation-summary", "fair-value-forecaster", "piotroski-score",
            "dupont-analysis", "financial-health-dna",
        ),
        priority=3,
    ),
    # Dividend & Income
    "income_investing": IntentCluster(
        terms=(
            "dividend", "yield", "payout", "dividend growth", "income",
            "passive income", "drip", "sip",
        ),
        tools=("dividend-crystal-ball",),
        priority=3,
    ),
    # Strategy Building
    "strategy_building": IntentCluster(
        terms=(
            "strategy", "playbook", "rules", "entry", "exit", "setup", "system", "plan",
            "checklist", "template",
        ),
        tools=("playbook-builder",),
        priority=2,
    ),
    # Fees & Costs
    "trading_costs": IntentCluster(
        terms=(
            "fees", "stt", "gst", "stamp duty", "brokerage", "transaction cost",
            "slippage", "impact cost", "charges",
        ),
        tools=("trade-expectancy",),
        priority=2,
    ),
})

# Tested against the raw query in order; every match is reported.
QUERY_PATTERNS: tuple[QueryPattern, ...] = (
    # "How many lots can I trade with X capital"
    QueryPattern(
        pattern=re.compile(r"how many (lots?|qty|quantity).*?(capital|money|account)", re.IGNORECASE),
        intent="position_sizing",
        tools=("fno-risk-advisor",),
    ),
    # "Calculate position size for X"
    QueryPattern(
        pattern=re.compile(r"(calculate|compute|find|what).*(position size|lot size|quantity)", re.IGNORECASE),
        intent="position_sizing",
        tools=("fno-risk-advisor",),
    ),
    # "Show RSI divergence"
    QueryPattern(
        pattern=re.compile(r"(show|find|detect).*(divergence|div)", re.IGNORECASE),
        intent="divergence_analysis",
        tools=("technical-indicators", "pattern-matcher"),
    ),
    # "What's the support/resistance"
    QueryPattern(
        pattern=re.compile(r"(what|where|show|find).*(support|resistance|level|zone)", re.IGNORECASE),
        intent="level_analysis",
        tools=("price-structure",),
    ),
    # "OI analysis for Nifty"
    QueryPattern(
        pattern=re.compile(r"(oi|open interest).*(analysis|buildup|change)", re.IGNORECASE),
        intent="oi_analysis",
        tools=("options-strategy",),
    ),
    # "Best strategy for intraday/swing"
    QueryPattern(
        pattern=re.compile(r"(best|good|recommend).*(strategy|setup|system).*(intraday|swing|scalp)", re.IGNORECASE),
        intent="strategy_recommendation",
        tools=("playbook-builder",),
    ),
    # "Why am I losing money"
    QueryPattern(
        pattern=re.compile(r"(why|how).*(losing|loss|not profitable)", re.IGNORECASE),
        intent="performance_analysis",
        tools=("trade-journal", "trade-expectancy"),
    ),
    # "FII/DII data"
    QueryPattern(
        pattern=re.compile(r"(fii|dii|institutional).*(data|flow|buying|selling)", re.IGNORECASE),
        intent="institutional_flow",
        tools=("narrative-theme",),
    ),
    # "Breakout stocks"
    QueryPattern(
        pattern=re.compile(r"(breakout|breakdown|breaking).*(stock|share|scrip)", re.IGNORECASE),
        intent="breakout_scan",
        tools=("pattern-matcher", "price-structure"),
    ),
    # "Calculate fees/charges"
    QueryPattern(
        pattern=re.compile(r"(calculate|compute|what).*(fees?|charges?|stt|brokerage|cost)", re.IGNORECASE),
        intent="fee_calculation",
        tools=("trade-expectancy",),
    ),
    # "Is X overvalued/undervalued"
    QueryPattern(
        pattern=re.compile(r"(is|check).*(overvalued|undervalued|cheap|expensive|fairly valued)", re.IGNORECASE),
        intent="valuation_check",
        tools=("valuation-summary", "fair-value-forecaster"),
    ),
    # "Entry/Exit rules"
    QueryPattern(
        pattern=re.compile(r"(entry|exit|when to buy|when to sell).*(rules?|criteria|conditions?)", re.IGNORECASE),
        intent="trading_rules",
        tools=("playbook-builder",),
    ),
    # "Trailing stop for X"
    QueryPattern(
        pattern=re.compile(r"(trailing|dynamic).*(stop|sl)", re.IGNORECASE),
        intent="stop_management",
        tools=("risk-health-dashboard", "fno-risk-advisor"),
    ),
    # "Compare with peers"
    QueryPattern(
        pattern=re.compile(r"(compare|vs|versus|peer).*(company|stock|peer)", re.IGNORECASE),
        intent="peer_comparison",
        tools=("peer-comparison",),
    ),
)
