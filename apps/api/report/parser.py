"""Tolerant JSON extraction for model output.

The analysis prompt asks for bare JSON, but replies sometimes arrive wrapped
in prose or a ```json fence. The fallback takes everything from the first
``{`` to the last ``}`` and parses that. It does not track nesting, so text
holding two separate objects, or stray braces inside strings, will not
parse; callers get an ExtractionError in that case.
"""

from __future__ import annotations

import json
from typing import Any


class ExtractionError(ValueError):
    """Raised when no JSON object can be recovered from model output."""

    def __init__(self, raw_text: str, message: str = "no valid JSON object found"):
        super().__init__(message)
        self.raw_text = raw_text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    # NaN and Infinity are not JSON
    return json.loads(text, parse_constant=_reject_constant)


def extract_json(text: str) -> Any:
    """Parse ``text`` as JSON, falling back to the outermost brace span."""
    try:
        return _loads(text)
    except ValueError:
        pass

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ExtractionError(text)

    try:
        return _loads(text[start:end + 1])
    except ValueError as exc:
        raise ExtractionError(text) from exc
