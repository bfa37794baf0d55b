"""Render tool results as a single text payload."""

from __future__ import annotations

import json
import math
from typing import Any

EMPTY_RESULT_TEXT = "Operation completed successfully."


def _float_text(value: float) -> str:
    # Same spelling as a JavaScript number: 1.0 -> "1", inf -> "Infinity".
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_tool_result(result: Any) -> str:
    """
    Convert a tool result into text for a text-only channel.

    None becomes a fixed sentinel and strings pass through unchanged. Booleans
    and numbers are spelled as JavaScript would (``true``, ``1``, ``Infinity``).
    Everything else is pretty-printed JSON with two-space indentation.
    """
    if result is None:
        return EMPTY_RESULT_TEXT
    if isinstance(result, str):
        return result
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, int):
        return str(result)
    if isinstance(result, float):
        return _float_text(result)
    try:
        return json.dumps(result, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(result)
