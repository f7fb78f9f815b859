"""
MQL Dashboard - Defensive JSON extraction from agent / LLM output.
"""

from __future__ import annotations

import json
import re
from typing import Any

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.S)


def _first_json_object(text: str) -> str | None:
    """Return the first balanced {...} block in text, ignoring braces inside strings."""
    start = text.find("{")
    while start != -1:
        depth = 0
        in_str = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_str:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_str = False
                continue
            if ch == '"':
                in_str = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        start = text.find("{", start + 1)
    return None


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def _parse_text(text: str) -> Any:
    t = (text or "").strip()
    if not t:
        return None
    fence = _FENCE_RE.search(t)
    if fence:
        t = fence.group(1).strip()
    parsed = _loads(t)
    if parsed is not None:
        return parsed
    block = _first_json_object(t)
    if block:
        # Trailing commas are the most common LLM slip
        return _loads(block) or _loads(re.sub(r",\s*([}\]])", r"\1", block))
    return None


def parse_llm_json(raw: Any, default: Any = None) -> Any:
    """
    Parse loosely structured agent output into a dict.

    Accepts a dict (returned as-is), or text that may be wrapped in markdown
    fences or surrounded by prose. A {"response": ...} envelope without a
    "result" key is unwrapped once. Anything unparseable returns `default`.
    """
    parsed = raw if isinstance(raw, dict) else _parse_text(raw) if isinstance(raw, str) else None
    if isinstance(parsed, str):
        parsed = _parse_text(parsed)
    if not isinstance(parsed, dict):
        return default
    if "result" not in parsed and "response" in parsed:
        inner = parsed["response"]
        if isinstance(inner, str):
            inner = _parse_text(inner)
        if isinstance(inner, dict):
            return inner
    return parsed
