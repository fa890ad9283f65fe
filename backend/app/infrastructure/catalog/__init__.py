from .in_memory_card_catalog import InMemoryCardCatalog
from .yaml_card_catalog import YamlCardCatalog

__all__ = [
    "InMemoryCardCatalog",
    "YamlCardCatalog",
]
