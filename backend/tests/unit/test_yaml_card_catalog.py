"""Unit tests for the YAML and in-memory card catalogs."""

from pathlib import Path

import pytest

from app.config import get_settings
from app.domain.entities import CardDescriptor, ComplexityLevel, UserSegment
from app.domain.exceptions import CatalogLoadError
from app.infrastructure.catalog import InMemoryCardCatalog, YamlCardCatalog


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "cards.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_bundled_catalog_loads():
    catalog = YamlCardCatalog(get_settings().card_catalog_path)
    cards = catalog.all()
    assert len(cards) == 79
    assert cards[0].id == "stock-snapshot"
    assert len({c.id for c in cards}) == len(cards)

    advisor = catalog.get("fno-risk-advisor")
    assert advisor is not None
    assert advisor.has_risk_sizing


def test_fields_are_mapped(tmp_path: Path):
    path = _write(
        tmp_path,
        """
cards:
  - id: first
    label: "First Card"
    category: technical
    description: "  Padded description.  "
    tags: ["rsi", "momentum"]
    segments: [swing, intraday]
    complexity: advanced
    default: true
    has_edge_metric: true
  - id: second
    label: Second
    category: value
""",
    )
    catalog = YamlCardCatalog(path)

    first, second = catalog.all()
    assert first.description == "Padded description."
    assert first.tags == ("rsi", "momentum")
    assert first.segments == (UserSegment.SWING, UserSegment.INTRADAY)
    assert first.complexity is ComplexityLevel.ADVANCED
    assert first.default and first.has_edge_metric
    assert not first.has_risk_sizing

    assert second.kind == "card"
    assert second.tags == ()
    assert second.segments is None
    assert second.complexity is None
    assert catalog.path == path


def test_missing_file(tmp_path: Path):
    with pytest.raises(CatalogLoadError, match="cannot read file"):
        YamlCardCatalog(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path):
    with pytest.raises(CatalogLoadError, match="invalid YAML"):
        YamlCardCatalog(_write(tmp_path, "cards: [unclosed"))


def test_missing_cards_list(tmp_path: Path):
    with pytest.raises(CatalogLoadError, match="'cards' list"):
        YamlCardCatalog(_write(tmp_path, "items: []\n"))


def test_missing_required_field(tmp_path: Path):
    with pytest.raises(CatalogLoadError, match="missing label"):
        YamlCardCatalog(_write(tmp_path, "cards:\n  - id: x\n    category: value\n"))


def test_unknown_segment(tmp_path: Path):
    content = "cards:\n  - id: x\n    label: X\n    category: value\n    segments: [daytrader]\n"
    with pytest.raises(CatalogLoadError, match="card 'x'"):
        YamlCardCatalog(_write(tmp_path, content))


def test_duplicate_ids(tmp_path: Path):
    content = (
        "cards:\n"
        "  - {id: x, label: X, category: value}\n"
        "  - {id: x, label: Y, category: value}\n"
    )
    with pytest.raises(CatalogLoadError, match="duplicate card id 'x'"):
        YamlCardCatalog(_write(tmp_path, content))


def test_in_memory_catalog_lookup_and_order():
    cards = [CardDescriptor(id=i, label=i.upper(), category="c") for i in ("b", "a", "c")]
    catalog = InMemoryCardCatalog(cards)
    assert [c.id for c in catalog.all()] == ["b", "a", "c"]
    assert catalog.get("a").label == "A"
    assert catalog.get("z") is None
    assert len(catalog) == 3


def test_in_memory_catalog_returns_copies():
    catalog = InMemoryCardCatalog([CardDescriptor(id="a", label="A", category="c")])
    catalog.all().clear()
    assert len(catalog.all()) == 1
