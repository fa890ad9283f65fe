"""Abstract catalog interface (port) for the analytics cards the engine ranks."""

from abc import ABC, abstractmethod

from app.domain.entities import CardDescriptor


class CardCatalog(ABC):
    """Port for read-only card lookup, implemented in the infrastructure layer.

    Iteration order is significant: ranking ties keep catalog order.
    """

    @abstractmethod
    def all(self) -> list[CardDescriptor]:
        """Every card, in catalog order."""
        ...

    @abstractmethod
    def get(self, card_id: str) -> CardDescriptor | None:
        """A single card by id, or None when unknown."""
        ...
