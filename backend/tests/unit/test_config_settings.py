"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_relative_catalog_path_resolves_against_backend_dir():
    settings = Settings(card_catalog_file="data/cards.yaml")
    backend_dir = Path(__file__).resolve().parents[2]
    assert settings.card_catalog_path == backend_dir / "data" / "cards.yaml"
    assert settings.card_catalog_path.is_file()


def test_absolute_catalog_path_is_kept(tmp_path: Path):
    target = tmp_path / "cards.yaml"
    settings = Settings(card_catalog_file=str(target))
    assert settings.card_catalog_path == target


def test_catalog_path_from_environment(monkeypatch, tmp_path: Path):
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("CARD_CATALOG_FILE", str(target))
    assert Settings().card_catalog_path == target


def test_search_defaults():
    settings = Settings()
    assert settings.default_max_results == 10
    assert settings.quick_search_max_results == 5
    assert settings.related_tools_max_results == 4
