"""Load and validate the provider/display settings for the news feed."""

import json
import logging
from pathlib import Path

import jsonschema
import yaml

logger = logging.getLogger("publico.config")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"
SETTINGS_DIR = PROJECT_ROOT / "settings"
DEFAULT_SETTINGS_PATH = SETTINGS_DIR / "publico.yaml"


def load_schema() -> dict:
    schema_path = SCHEMAS_DIR / "settings.schema.json"
    with open(schema_path) as f:
        return json.load(f)


def validate_settings(settings: dict) -> None:
    """Validate a settings dict against the JSON schema."""
    schema = load_schema()
    jsonschema.validate(instance=settings, schema=schema)


def _apply_defaults(settings: dict) -> dict:
    """Fill optional keys the schema does not require."""
    provider = settings["provider"]
    provider.setdefault("name", "Público")

    api = settings["api"]
    api.setdefault("timeout", 15)
    api.setdefault("user_agent", "PublicoNewsFeed/1.0")

    display = settings["display"]
    display.setdefault("author_separator", ", ")
    display.setdefault("tags_label", "Tópicos")
    display.setdefault("keywords_label", "Keywords")
    display.setdefault("open_label", "Abrir no Navegador")
    return settings


def load_settings(path: str | Path | None = None) -> dict:
    """Load settings from YAML, validate them and fill optional defaults.

    Args:
        path: Settings file to read. Defaults to settings/publico.yaml.

    Returns:
        Settings dict with ``provider``, ``api`` and ``display`` sections.
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as f:
        settings = yaml.safe_load(f) or {}

    validate_settings(settings)
    settings = _apply_defaults(settings)
    logger.debug("Loaded settings from %s", settings_path)
    return settings
