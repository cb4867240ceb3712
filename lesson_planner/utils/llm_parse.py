"""LLM JSON reply decoding helpers."""

from __future__ import annotations

import json
import re
from typing import Any


def _sanitize_invalid_escapes(raw: str) -> str:
    return re.sub(r'\\([^"\\/bfnrtu])', r"\1", raw)


def _extract_json_object(raw: str) -> str | None:
    if not raw:
        return None
    start = raw.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    for idx in range(start, len(raw)):
        char = raw[idx]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return raw[start : idx + 1]
    return None


def load_json_object(raw: str) -> dict[str, Any]:
    """Decode the single JSON object in a model reply.

    Tolerates surrounding prose or code fences and invalid backslash escapes.
    Never calls the model again.

    Raises
    ------
    ValueError
        If no JSON object can be decoded.
    """
    if not raw or not raw.strip():
        raise ValueError("Empty response from model.")
    candidates = [raw.strip()]
    extracted = _extract_json_object(raw)
    if extracted and extracted != candidates[0]:
        candidates.append(extracted)

    for candidate in candidates:
        for text in (candidate, _sanitize_invalid_escapes(candidate)):
            try:
                data = json.loads(text)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict):
                return data
    raise ValueError("Unable to parse a JSON object from the model response.")
