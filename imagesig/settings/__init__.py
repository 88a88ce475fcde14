"""Settings package.

The CLI and the web layer import from `imagesig.settings`.
We re-export the schema, loading and validation API here.
"""

from .loader import (
    EMPTY_SIGNATURES_MESSAGE,
    SettingsDeserializationError,
    SettingsError,
    SettingsValidationError,
    dump_settings,
    load_settings,
    load_settings_file,
    parse_settings_text,
    read_settings_file,
    validate_settings,
)
from .response import ValidationResponse, validate_raw_settings
from .schema import (
    GithubActions,
    Keyless,
    KeylessInfo,
    KeylessPrefix,
    PubKeys,
    Settings,
    Signature,
)

__all__ = [
    "EMPTY_SIGNATURES_MESSAGE",
    "SettingsDeserializationError",
    "SettingsError",
    "SettingsValidationError",
    "dump_settings",
    "load_settings",
    "load_settings_file",
    "parse_settings_text",
    "read_settings_file",
    "validate_settings",
    "ValidationResponse",
    "validate_raw_settings",
    "GithubActions",
    "Keyless",
    "KeylessInfo",
    "KeylessPrefix",
    "PubKeys",
    "Settings",
    "Signature",
]
