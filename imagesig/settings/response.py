from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .loader import SettingsError, load_settings, validate_settings


@dataclass(frozen=True)
class ValidationResponse:
    valid: bool
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"valid": self.valid}
        if not self.valid:
            out["message"] = self.message or ""
        return out


def validate_raw_settings(raw: Any, logger: Optional[logging.Logger] = None) -> ValidationResponse:
    """Answer the host's settings validation request.

    Deserialization and validation failures are reported in the response,
    with the error message passed through verbatim.
    """
    try:
        settings = load_settings(raw)
        validate_settings(settings, logger)
    except SettingsError as e:
        return ValidationResponse(valid=False, message=str(e))
    return ValidationResponse(valid=True)
