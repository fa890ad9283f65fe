"""In-memory implementation of the CardCatalog port."""

from collections.abc import Iterable

from app.application.interfaces.card_catalog import CardCatalog
from app.domain.entities import CardDescriptor


class InMemoryCardCatalog(CardCatalog):
    """Catalog over descriptors already held in memory; keeps their order."""

    def __init__(self, cards: Iterable[CardDescriptor] = ()):
        self._cards: list[CardDescriptor] = list(cards)
        self._by_id: dict[str, CardDescriptor] = {}
        for card in self._cards:
            # first occurrence wins, matching iteration order
            self._by_id.setdefault(card.id, card)

    def all(self) -> list[CardDescriptor]:
        return list(self._cards)

    def get(self, card_id: str) -> CardDescriptor | None:
        return self._by_id.get(card_id)

    def __len__(self) -> int:
        return len(self._cards)
