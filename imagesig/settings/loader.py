from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .schema import SIGNATURE_KINDS, Settings

_logger = logging.getLogger(__name__)

EMPTY_SIGNATURES_MESSAGE = "Signatures must not be empty"


class SettingsError(Exception):
    pass


class SettingsDeserializationError(SettingsError):
    pass


class SettingsValidationError(SettingsError):
    pass


def _describe_errors(exc: ValidationError) -> str:
    """Collapse pydantic errors into one line per offending entry or field."""
    parts: List[str] = []
    seen_entries = set()
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) >= 2 and loc[0] == "signatures" and isinstance(loc[1], int):
            idx = loc[1]
            if idx in seen_entries:
                continue
            seen_entries.add(idx)
            parts.append(
                f"signatures entry {idx}: does not match any signature kind "
                f"(expected one of: {', '.join(SIGNATURE_KINDS)})"
            )
            continue
        where = ".".join(str(p) for p in loc) or "settings"
        parts.append(f"{where}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def load_settings(raw: Any) -> Settings:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SettingsDeserializationError("Settings must be a mapping/object at top level.")
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise SettingsDeserializationError(_describe_errors(e)) from e


def validate_settings(settings: Settings, logger: Optional[logging.Logger] = None) -> None:
    logger = logger or _logger
    logger.info("starting settings validation")

    if not settings.signatures:
        raise SettingsValidationError(EMPTY_SIGNATURES_MESSAGE)


def dump_settings(settings: Settings) -> Dict[str, Any]:
    return settings.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_settings_text(text: str, *, suffix: Optional[str] = None) -> Dict[str, Any]:
    try:
        if (suffix or "").lower() == ".json":
            raw = json.loads(text) if text.strip() else {}
        else:
            # YAML is a superset of JSON, so this also covers .json-like content
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SettingsDeserializationError(f"Unable to parse settings: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SettingsDeserializationError("Settings must be a mapping/object at top level.")
    return raw


def read_settings_file(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Settings file not found: {p}")

    try:
        text = p.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise SettingsDeserializationError(f"Settings file {p} is not valid UTF-8: {e}") from e
    return parse_settings_text(text, suffix=p.suffix)


def load_settings_file(path: str | Path) -> Settings:
    return load_settings(read_settings_file(path))
