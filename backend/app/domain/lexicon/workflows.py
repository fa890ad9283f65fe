"""Workflow chains and the static tables behind contextual suggestions."""

from types import MappingProxyType

from app.domain.entities.card import UserSegment
from app.domain.entities.lexicon import (
    LearningPath,
    LearningStage,
    MarketConditionPlaybook,
    NextToolRule,
    ToolGroupSuggestion,
    WorkflowChain,
)

# Ordered: workflow suggestion returns the first chain whose trigger matches.
WORKFLOW_CHAINS: tuple[WorkflowChain, ...] = (
    WorkflowChain(
        name="intraday_morning",
        description="Morning intraday preparation",
        sequence=(
            "market-regime-radar", "price-structure", "trade-flow-intel",
            "fno-risk-advisor",
        ),
        triggers=("pre_market", "intraday"),
    ),
    WorkflowChain(
        name="fno_analysis",
        description="F&O decision making",
        sequence=("options-strategy", "fno-risk-advisor", "trade-expectancy"),
        triggers=("options", "futures", "fno", "expiry"),
    ),
    WorkflowChain(
        name="swing_research",
        description="Swing trade research workflow",
        sequence=(
            "pattern-matcher", "delivery-analysis", "price-structure",
            "risk-health-dashboard",
        ),
        triggers=("swing", "positional"),
    ),
    WorkflowChain(
        name="value_investing",
        description="Fundamental analysis for long-term",
        sequence=(
            "valuation-summary", "financial-health-dna", "fair-value-forecaster",
            "dividend-crystal-ball",
        ),
        triggers=("investing", "long_term", "fundamental", "value"),
    ),
    WorkflowChain(
        name="trade_review",
        description="Post-trade analysis",
        sequence=("trade-journal", "trade-expectancy", "drawdown-var"),
        triggers=("review", "journal", "post_market", "loss", "mistake"),
    ),
    WorkflowChain(
        name="sector_analysis",
        description="Sector and theme analysis",
        sequence=("narrative-theme", "market-regime-radar", "momentum-heatmap"),
        triggers=("sector", "theme", "rotation", "psu", "defence", "railway"),
    ),
)

# After using the key tool, suggest ``next`` for ``reason``.
NEXT_TOOL_MAP: MappingProxyType[str, NextToolRule] = MappingProxyType({
    "market-regime-radar": NextToolRule(
        next=("price-structure", "volatility-regime", "momentum-heatmap"),
        reason="Now identify key levels and momentum",
    ),
    "pattern-matcher": NextToolRule(
        next=("price-structure", "fno-risk-advisor", "delivery-analysis"),
        reason="Confirm levels and size your position",
    ),
    "candlestick-hero": NextToolRule(
        next=("technical-indicators", "pattern-matcher", "price-structure"),
        reason="Add indicator confirmation",
    ),
    "price-structure": NextToolRule(
        next=("fno-risk-advisor", "trade-flow-intel", "technical-indicators"),
        reason="Size position based on levels",
    ),
    "delivery-analysis": NextToolRule(
        next=("trade-flow-intel", "price-structure", "fno-risk-advisor"),
        reason="Confirm institutional activity",
    ),
    "trade-flow-intel": NextToolRule(
        next=("price-structure", "fno-risk-advisor", "delivery-analysis"),
        reason="Identify entry levels",
    ),
    "options-strategy": NextToolRule(
        next=("fno-risk-advisor", "trade-expectancy"),
        reason="Calculate position size and expected return",
    ),
    "fno-risk-advisor": NextToolRule(
        next=("trade-expectancy", "playbook-builder"),
        reason="Confirm expectancy and entry rules",
    ),
    "trade-expectancy": NextToolRule(
        next=("fno-risk-advisor", "trade-journal", "playbook-builder"),
        reason="Refine sizing or document strategy",
    ),
    "trade-journal": NextToolRule(
        next=("playbook-builder", "drawdown-var"),
        reason="Build rules from insights",
    ),
    "playbook-builder": NextToolRule(
        next=("fno-risk-advisor", "trade-journal"),
        reason="Apply rules to next trade",
    ),
    "valuation-summary": NextToolRule(
        next=("financial-health-dna", "fair-value-forecaster", "piotroski-score"),
        reason="Deep dive into quality",
    ),
    "fair-value-forecaster": NextToolRule(
        next=("valuation-summary", "financial-health-dna", "dividend-crystal-ball"),
        reason="Cross-check with other metrics",
    ),
    "financial-health-dna": NextToolRule(
        next=("piotroski-score", "dupont-analysis", "valuation-summary"),
        reason="Detailed scoring breakdown",
    ),
    "narrative-theme": NextToolRule(
        next=("momentum-heatmap", "delivery-analysis", "price-structure"),
        reason="Find entry points in theme leaders",
    ),
})

TIME_BASED_SUGGESTIONS: MappingProxyType[str, ToolGroupSuggestion] = MappingProxyType({
    "pre_market": ToolGroupSuggestion(
        tools=("market-regime-radar", "price-structure", "narrative-theme"),
        reason="Prepare for the trading day",
    ),
    "market_open": ToolGroupSuggestion(
        tools=("trade-flow-intel", "candlestick-hero", "price-structure"),
        reason="Opening hour analysis",
    ),
    "mid_session": ToolGroupSuggestion(
        tools=("technical-indicators", "delivery-analysis", "momentum-heatmap"),
        reason="Mid-session review",
    ),
    "closing_hour": ToolGroupSuggestion(
        tools=("delivery-analysis", "trade-flow-intel", "price-structure"),
        reason="End of day positioning",
    ),
    "post_market": ToolGroupSuggestion(
        tools=("trade-journal", "drawdown-var", "trade-expectancy"),
        reason="Post-market review and learning",
    ),
})

EXPIRY_DAY_TOOLS = ToolGroupSuggestion(
    tools=("options-strategy", "fno-risk-advisor", "price-structure"),
    reason="Weekly expiry - focus on options and key levels",
    warnings=(
        "Theta decay accelerates - avoid long options",
        "Gamma risk increases near ATM strikes", "Watch for pin risk near max pain",
    ),
)

MARKET_CONDITION_SUGGESTIONS: MappingProxyType[str, MarketConditionPlaybook] = MappingProxyType({
    "bullish": MarketConditionPlaybook(
        tools=("momentum-heatmap", "trend-strength", "delivery-analysis"),
        strategies=("trend following", "breakout", "dip buying"),
        avoid=("shorting", "mean reversion on strength"),
    ),
    "bearish": MarketConditionPlaybook(
        tools=("drawdown-var", "volatility-regime", "price-structure"),
        strategies=("hedging", "shorting rallies", "put buying"),
        avoid=("catching falling knives", "averaging down"),
    ),
    "sideways": MarketConditionPlaybook(
        tools=("price-structure", "volatility-regime", "options-strategy"),
        strategies=("range trading", "selling options", "iron condors"),
        avoid=("trend following", "breakout chasing"),
    ),
    "volatile": MarketConditionPlaybook(
        tools=("volatility-regime", "fno-risk-advisor", "drawdown-var"),
        strategies=("reduced position size", "wider stops", "straddles"),
        avoid=("selling naked options", "overleveraging"),
    ),
})

LEARNING_PATHS: MappingProxyType[UserSegment, LearningPath] = MappingProxyType({
    UserSegment.SCALPER: LearningPath(
        name="Scalper Learning Path",
        description="Master quick intraday trades",
        stages=(
            LearningStage("Foundation", ("candlestick-hero", "price-structure"), "Read price action and identify levels"),
            LearningStage("Risk Management", ("fno-risk-advisor", "trade-expectancy"), "Size positions correctly"),
            LearningStage("Execution", ("trade-flow-intel", "playbook-builder"), "Build and follow a trading system"),
            LearningStage("Review", ("trade-journal",), "Identify and fix mistakes"),
        ),
    ),
    UserSegment.INTRADAY: LearningPath(
        name="Intraday Trader Path",
        description="Master day trading",
        stages=(
            LearningStage("Market Context", ("market-regime-radar", "price-structure"), "Understand daily market structure"),
            LearningStage("Analysis", ("technical-indicators", "trade-flow-intel"), "Combine indicators and flow"),
            LearningStage("Risk & Sizing", ("fno-risk-advisor", "trade-expectancy"), "Proper position sizing"),
            LearningStage("Psychology", ("trade-journal", "playbook-builder"), "Build discipline"),
        ),
    ),
    UserSegment.SWING: LearningPath(
        name="Swing Trader Path",
        description="Master multi-day trades",
        stages=(
            LearningStage("Setup Identification", ("pattern-matcher", "delivery-analysis"), "Find high-probability setups"),
            LearningStage("Confirmation", ("trend-strength", "momentum-heatmap"), "Confirm trend and momentum"),
            LearningStage("Entry & Exit", ("price-structure", "risk-health-dashboard"), "Define precise levels"),
            LearningStage("Management", ("trade-journal", "drawdown-var"), "Track and improve"),
        ),
    ),
    UserSegment.POSITIONAL: LearningPath(
        name="Positional Trader Path",
        description="Master medium-term trades",
        stages=(
            LearningStage("Theme Research", ("narrative-theme", "market-regime-radar"), "Identify winning themes"),
            LearningStage("Stock Selection", ("delivery-analysis", "financial-health-dna"), "Pick quality stocks in themes"),
            LearningStage("Valuation", ("valuation-summary", "fair-value-forecaster"), "Ensure reasonable valuation"),
            LearningStage("Portfolio", ("drawdown-var", "trade-journal"), "Manage portfolio risk"),
        ),
    ),
    UserSegment.INVESTOR: LearningPath(
        name="Long-Term Investor Path",
        description="Build wealth over time",
        stages=(
            LearningStage("Fundamental Analysis", ("financial-health-dna", "piotroski-score"), "Assess business quality"),
            LearningStage("Valuation", ("fair-value-forecaster", "valuation-summary"), "Determine fair value"),
            LearningStage("Growth & Quality", ("dupont-analysis", "growth-summary"), "Understand growth drivers"),
            LearningStage("Income", ("dividend-crystal-ball",), "Build passive income"),
        ),
    ),
})
