"""YAML-file implementation of the CardCatalog port."""

from pathlib import Path

import yaml

from app.domain.entities import CardDescriptor, ComplexityLevel, UserSegment
from app.domain.exceptions import CatalogLoadError
from app.infrastructure.catalog.in_memory_card_catalog import InMemoryCardCatalog
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("CardCatalog")


class YamlCardCatalog(InMemoryCardCatalog):
    """Loads ``cards:`` from a YAML file once, preserving file order.

    Expected layout::

        cards:
          - id: stock-snapshot
            label: "Stock Snapshot"
            category: overview
            tags: ["stock", "ticker"]
            segments: [intraday, swing]
            complexity: beginner
            default: true
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        try:
            cards = self._load()
        except CatalogLoadError as e:
            plog.step_error(PipelineStage.CATALOG, "Card catalog not loaded", error=e)
            raise
        super().__init__(cards)
        plog.step_complete(PipelineStage.CATALOG, f"Loaded {len(self)} cards", path=self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> list[CardDescriptor]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CatalogLoadError(str(self._path), f"cannot read file ({e})") from e
        except yaml.YAMLError as e:
            raise CatalogLoadError(str(self._path), f"invalid YAML ({e})") from e

        if not isinstance(data, dict) or not isinstance(data.get("cards"), list):
            raise CatalogLoadError(str(self._path), "expected a top-level 'cards' list")

        cards: list[CardDescriptor] = []
        seen: set[str] = set()
        for index, entry in enumerate(data["cards"]):
            card = self._build_card(entry, index)
            if card.id in seen:
                raise CatalogLoadError(str(self._path), f"duplicate card id '{card.id}'")
            seen.add(card.id)
            cards.append(card)
        return cards

    def _build_card(self, entry: object, index: int) -> CardDescriptor:
        """Map a raw YAML dict to a CardDescriptor domain entity."""
        if not isinstance(entry, dict):
            raise CatalogLoadError(str(self._path), f"card #{index} is not a mapping")
        missing = [key for key in ("id", "label", "category") if not entry.get(key)]
        if missing:
            raise CatalogLoadError(
                str(self._path), f"card #{index} is missing {', '.join(missing)}"
            )

        try:
            segments = entry.get("segments")
            complexity = entry.get("complexity")
            return CardDescriptor(
                id=str(entry["id"]),
                label=str(entry["label"]),
                category=str(entry["category"]),
                description=str(entry.get("description", "")).strip(),
                tags=tuple(str(tag) for tag in entry.get("tags") or ()),
                kind=str(entry.get("kind", "card")),
                segments=tuple(UserSegment(s) for s in segments) if segments else None,
                complexity=ComplexityLevel(complexity) if complexity else None,
                default=bool(entry.get("default", False)),
                has_edge_metric=bool(entry.get("has_edge_metric", False)),
                has_risk_sizing=bool(entry.get("has_risk_sizing", False)),
                has_behavioral_tip=bool(entry.get("has_behavioral_tip", False)),
            )
        except ValueError as e:
            # unknown segment or complexity value
            raise CatalogLoadError(str(self._path), f"card '{entry['id']}': {e}") from e
