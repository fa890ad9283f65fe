"""Command-bar autocomplete, glossary entries and empty-result help copy."""

from types import MappingProxyType

from app.domain.entities.lexicon import AutocompleteGroup, ErrorSuggestion, TermExplanation

# Ordered: the first group whose trigger prefixes the input wins.
AUTOCOMPLETE_SUGGESTIONS: tuple[AutocompleteGroup, ...] = (
    AutocompleteGroup(
        trigger="show",
        suggestions=(
            "show RSI divergence", "show support resistance levels", "show OI buildup",
            "show delivery analysis", "show candlestick patterns",
        ),
        category="analysis",
    ),
    AutocompleteGroup(
        trigger="calculate",
        suggestions=(
            "calculate position size for 2L capital",
            "calculate trading fees for intraday", "calculate break-even win rate",
            "calculate lot size for 1% risk",
        ),
        category="calculation",
    ),
    AutocompleteGroup(
        trigger="find",
        suggestions=(
            "find breakout stocks", "find undervalued stocks",
            "find high dividend yield stocks", "find stocks near support",
        ),
        category="screening",
    ),
    AutocompleteGroup(
        trigger="what",
        suggestions=(
            "what is my win rate", "what are the support levels",
            "what is the fair value", "what strategy suits me",
        ),
        category="query",
    ),
    AutocompleteGroup(
        trigger="why",
        suggestions=("why am I losing money", "why is OI increasing"),
        category="analysis",
    ),
    AutocompleteGroup(
        trigger="how",
        suggestions=(
            "how many lots can I trade", "how to set trailing stop",
            "how to improve win rate",
        ),
        category="guidance",
    ),
)

TERM_EXPLANATIONS: MappingProxyType[str, TermExplanation] = MappingProxyType({
    "cpr": TermExplanation(
        definition=(
            "Central Pivot Range - A set of three price levels calculated from "
            "previous day's high, low, and close. Used for intraday trading to "
            "identify support/resistance."
        ),
        example="If price opens above CPR, it's bullish. Below CPR is bearish.",
        related=("pivot", "pdh", "pdl", "floor_pivots"),
    ),
    "vwap": TermExplanation(
        definition=(
            "Volume Weighted Average Price - The average price weighted by volume. "
            "Institutional benchmark for fair value during the day."
        ),
        example="Price above VWAP = bullish, below VWAP = bearish for intraday.",
        related=("anchored_vwap", "volume", "institutional"),
    ),
    "oi_buildup": TermExplanation(
        definition=(
            "Open Interest Buildup - When both price and OI increase together, it "
            "indicates new positions being created in the direction of price movement."
        ),
        example=(
            "Price up + OI up = Long buildup (bullish). Price down + OI up = Short "
            "buildup (bearish)."
        ),
        related=("open_interest", "long_buildup", "short_buildup", "short_covering"),
    ),
    "pcr": TermExplanation(
        definition=(
            "Put-Call Ratio - Ratio of put option OI to call option OI. High PCR "
            "(>1.2) indicates bearish sentiment, low PCR (<0.8) indicates bullish "
            "sentiment."
        ),
        example="PCR of 1.5 means more puts than calls, indicating hedging or bearish bets.",
        related=("put_call_ratio", "open_interest", "max_pain"),
    ),
    "r_multiple": TermExplanation(
        definition=(
            "R-Multiple - Profit or loss expressed as a multiple of initial risk. If "
            "you risked ₹1000 and made ₹2000 profit, that's 2R."
        ),
        example="A 3R trade means you made 3x your initial risk. Aim for avg R > 1.5",
        related=("risk_reward_ratio", "expectancy", "position_sizing"),
    ),
    "max_pain": TermExplanation(
        definition=(
            "Max Pain - The strike price at which option buyers would lose the maximum "
            "amount. Markets often gravitate toward max pain at expiry."
        ),
        example=(
            "If max pain is 22500 and Nifty is at 22700, there may be selling pressure "
            "toward 22500."
        ),
        related=("open_interest", "expiry", "options"),
    ),
    "fii_dii": TermExplanation(
        definition=(
            "FII (Foreign Institutional Investors) and DII (Domestic Institutional "
            "Investors) - Large players whose buying/selling impacts market direction."
        ),
        example=(
            "FII buying = bullish for markets. Consistent DII buying during FII "
            "selling = support."
        ),
        related=("institutional_flow", "smart_money"),
    ),
    "delivery_percentage": TermExplanation(
        definition=(
            "Delivery Percentage - Percentage of traded volume that results in actual "
            "ownership transfer (not squared off). High delivery = conviction."
        ),
        example=(
            "Delivery > 50% with price up = strong accumulation. < 30% = mostly "
            "speculative."
        ),
        related=("volume", "accumulation", "smart_money"),
    ),
})

ERROR_SUGGESTIONS: MappingProxyType[str, ErrorSuggestion] = MappingProxyType({
    "no_results": ErrorSuggestion(
        message="No matching tools found for your query.",
        suggestions=(
            "Try using more specific terms like 'RSI divergence' or 'position sizing'",
            "Check if you meant: support resistance, open interest, or technical indicators",
            "Browse all tools in the Tool Explorer",
        ),
    ),
    "ambiguous_query": ErrorSuggestion(
        message="Your query matches multiple categories.",
        suggestions=(
            "Add more context: Are you looking for analysis, calculation, or screening?",
            "Specify the asset: stock, index, or F&O",
            "Mention your trading style: intraday, swing, or positional",
        ),
    ),
    "invalid_symbol": ErrorSuggestion(
        message="Could not find the specified stock/index.",
        suggestions=(
            "Check the spelling of the symbol",
            "Use NSE symbols (e.g., RELIANCE, TCS, INFY)",
            "For indices, use: NIFTY, BANKNIFTY, SENSEX",
        ),
    ),
})
