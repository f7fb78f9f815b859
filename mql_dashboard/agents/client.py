"""
MQL Dashboard - Agent API client (hosted agent endpoint, LLM stand-in when no key is set).
"""

from __future__ import annotations

import uuid

import requests
from langchain_core.messages import HumanMessage, SystemMessage

from mql_dashboard.config import (
    AGENT_API_URL,
    AGENT_USER_ID,
    AGENT_TIMEOUT_SECONDS,
    get_agent_api_key,
    log_event,
)
from mql_dashboard.llm.providers import get_llm, has_llm_key


class AgentCallError(Exception):
    """The agent could not be reached or returned an unusable reply."""


AGENT_SYSTEM_PROMPT = """You are a marketing-operations agent. Reply with a single JSON object and nothing else:
{"result": "<one or two sentence summary>", "confidence": <0.0-1.0>, "metadata": {<counts, strings and status values relevant to the request>}}"""


def _call_http_agent(prompt: str, agent_id: str, api_key: str) -> str:
    headers = {"x-api-key": api_key, "Content-Type": "application/json"}
    payload = {
        "user_id": AGENT_USER_ID,
        "agent_id": agent_id,
        "session_id": f"{agent_id}-{uuid.uuid4().hex[:12]}",
        "message": prompt,
    }
    try:
        resp = requests.post(AGENT_API_URL, json=payload, headers=headers, timeout=AGENT_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise AgentCallError(f"Agent request failed: {e}") from e
    if resp.status_code not in (200, 201):
        raise AgentCallError(f"Agent returned HTTP {resp.status_code}: {resp.text[:200]}")
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and "response" in body:
        return body["response"]
    return body


def _call_llm_agent(prompt: str, agent_id: str):
    llm = get_llm()
    if llm is None:
        raise AgentCallError("LLM not available")
    try:
        resp = llm.invoke([SystemMessage(content=AGENT_SYSTEM_PROMPT), HumanMessage(content=prompt)])
    except Exception as e:
        raise AgentCallError(f"LLM agent stand-in failed: {e}") from e
    return (resp.content or "").strip()


def call_ai_agent(prompt: str, agent_id: str):
    """
    Send a natural-language prompt to the agent identified by agent_id.

    Returns the agent's raw reply (usually a JSON string, sometimes an already
    decoded dict). Raises AgentCallError when no backend is configured or the
    call fails.
    """
    api_key = get_agent_api_key()
    log_event("call_ai_agent", {"agent_id": agent_id, "backend": "http" if api_key else "llm", "prompt_len": len(prompt or "")}, "AGENT")
    if api_key:
        return _call_http_agent(prompt, agent_id, api_key)
    if has_llm_key():
        return _call_llm_agent(prompt, agent_id)
    raise AgentCallError("No agent backend configured: set AGENT_API_KEY (or MISTRAL_API_KEY / OPENAI_API_KEY) in .env")
