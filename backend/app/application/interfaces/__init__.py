from .card_catalog import CardCatalog

__all__ = [
    "CardCatalog",
]
