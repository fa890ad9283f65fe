"""Screener comparison operators and their natural-language aliases."""

from types import MappingProxyType

from app.domain.entities.lexicon import OperatorAlias

OPERATORS: MappingProxyType[str, OperatorAlias] = MappingProxyType({
    ">": OperatorAlias(
        symbol=">",
        aliases=("greater than", "more than", "above", "over", "exceeds", "higher than", "gt", ">"),
        description="Greater than",
    ),
    "<": OperatorAlias(
        symbol="<",
        aliases=("less than", "below", "under", "lower than", "lt", "<", "smaller than"),
        description="Less than",
    ),
    ">=": OperatorAlias(
        symbol=">=",
        aliases=("greater than or equal", "at least", "minimum", "min", ">=", "gte", "not less than"),
        description="Greater than or equal to",
    ),
    "<=": OperatorAlias(
        symbol="<=",
        aliases=(
            "less than or equal", "at most", "maximum", "max", "<=", "lte",
            "not more than", "upto", "up to",
        ),
        description="Less than or equal to",
    ),
    "=": OperatorAlias(
        symbol="=",
        aliases=("equal", "equals", "equal to", "exactly", "is", "=", "=="),
        description="Equal to",
    ),
    "!=": OperatorAlias(
        symbol="!=",
        aliases=(
            "not equal", "not", "exclude", "excluding", "except", "without",
            "!=", "<>", "not equal to",
        ),
        description="Not equal to",
    ),
    "between": OperatorAlias(
        symbol="between",
        aliases=("between", "in range", "from to", "range"),
        description="Between two values",
    ),
    "in": OperatorAlias(
        symbol="in",
        aliases=("in", "include", "including", "with", "has", "contains", "among"),
        description="In list of values",
    ),
    "top": OperatorAlias(
        symbol="top",
        aliases=("top", "best", "highest", "leading", "first"),
        description="Top N by metric",
    ),
    "bottom": OperatorAlias(
        symbol="bottom",
        aliases=("bottom", "worst", "lowest", "last"),
        description="Bottom N by metric",
    ),
})


def resolve_operator(text: str) -> str | None:
    """Return the canonical operator for an exact alias, or None if unknown."""
    needle = text.strip().lower()
    for symbol, definition in OPERATORS.items():
        if needle in definition.aliases:
            return symbol
    return None
