"""
MQL Dashboard - Collection and insight agent wrappers with response normalisation.
"""

from __future__ import annotations

import math
from typing import Optional

from mql_dashboard.agents import client
from mql_dashboard.agents.parsing import parse_llm_json
from mql_dashboard.config import log_event
from mql_dashboard.state import AgentResponse

COLLECTION_METADATA_DEFAULTS = {
    "processing_time": "",
    "messages_sent": 0,
    "responses_collected": 0,
    "collection_status": "initiated",
}
COLLECTION_STATUSES = ("initiated", "completed")

INSIGHT_METADATA_DEFAULTS = {
    "processing_time": "",
    "records_processed": 0,
    "dashboard_status": "processing",
    "total_mqls": 0,
}
INSIGHT_STATUSES = ("ready", "processing")


def _as_int(value, default: int = 0) -> int:
    number = _as_float(value, None)
    if number is None:
        return default
    return int(number)


def _as_float(value, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    # Infinity and NaN are valid JSON to Python but not usable counts
    return number if math.isfinite(number) else default


def _normalize_metadata(raw, defaults: dict, status_key: str, allowed: tuple) -> dict:
    raw = raw if isinstance(raw, dict) else {}
    meta = {**raw}
    for key, default in defaults.items():
        value = raw.get(key, default)
        if isinstance(default, int):
            meta[key] = max(0, _as_int(value, default))
        else:
            meta[key] = str(value) if value is not None else default
    if meta[status_key] not in allowed:
        meta[status_key] = defaults[status_key]
    return meta


def normalize_agent_response(data, metadata_defaults: dict, status_key: str, allowed: tuple) -> AgentResponse:
    """Coerce an untrusted agent payload into {result, confidence, metadata}. Never raises."""
    data = data if isinstance(data, dict) else {}
    result = data.get("result")
    if result is None and isinstance(data.get("response"), str):
        result = data["response"]
    return {
        "result": str(result) if result is not None else "",
        "confidence": _as_float(data.get("confidence"), 0.0),
        "metadata": _normalize_metadata(data.get("metadata"), metadata_defaults, status_key, allowed),
    }


def normalize_collection_response(data) -> AgentResponse:
    return normalize_agent_response(data, COLLECTION_METADATA_DEFAULTS, "collection_status", COLLECTION_STATUSES)


def normalize_insight_response(data) -> AgentResponse:
    return normalize_agent_response(data, INSIGHT_METADATA_DEFAULTS, "dashboard_status", INSIGHT_STATUSES)


def call_collection_agent(prompt: str, agent_id: str) -> Optional[AgentResponse]:
    """Collection agent call. Returns None on any failure."""
    try:
        raw = client.call_ai_agent(prompt, agent_id)
        return normalize_collection_response(parse_llm_json(raw, {}))
    except Exception as e:
        print(f"Collection agent error: {e}")
        log_event("call_collection_agent failed", {"agent_id": agent_id, "err": str(e)[:200]}, "AGENT")
        return None


def call_insights_agent(prompt: str, agent_id: str) -> Optional[AgentResponse]:
    """Insights agent call. Returns None on any failure."""
    try:
        raw = client.call_ai_agent(prompt, agent_id)
        return normalize_insight_response(parse_llm_json(raw, {}))
    except Exception as e:
        print(f"Insights agent error: {e}")
        log_event("call_insights_agent failed", {"agent_id": agent_id, "err": str(e)[:200]}, "AGENT")
        return None
