"""Application service (use case) for browsing the card catalog."""

from app.application.interfaces.card_catalog import CardCatalog
from app.domain.entities import CardDescriptor, UserSegment
from app.domain.exceptions import EntityNotFoundError


class CardService:
    """Read-only card lookups. Depends on the catalog port (DI)."""

    def __init__(self, catalog: CardCatalog):
        self._catalog = catalog

    def get_card(self, card_id: str) -> CardDescriptor:
        card = self._catalog.get(card_id)
        if card is None:
            raise EntityNotFoundError("Card", card_id)
        return card

    def list_cards(
        self,
        *,
        category: str | None = None,
        segment: UserSegment | None = None,
    ) -> list[CardDescriptor]:
        cards = self._catalog.all()
        if category:
            cards = [c for c in cards if c.category == category]
        if segment:
            cards = [c for c in cards if c.has_segment(segment)]
        return cards

    def list_categories(self) -> list[str]:
        """Distinct categories in catalog order."""
        return list(dict.fromkeys(card.category for card in self._catalog.all()))
