"""Tests for the agent client and the collection / insight wrappers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from mql_dashboard.agents import client
from mql_dashboard.agents.client import AgentCallError, call_ai_agent
from mql_dashboard.agents.responses import (
    call_collection_agent,
    call_insights_agent,
    normalize_collection_response,
    normalize_insight_response,
)


def _http_response(status=200, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


# =============================================================================
# call_ai_agent
# =============================================================================

class TestCallAIAgentHTTP:

    @pytest.fixture(autouse=True)
    def api_key(self, monkeypatch):
        monkeypatch.setenv("AGENT_API_KEY", "test-key")

    def test_posts_prompt_and_agent_id(self):
        with patch("mql_dashboard.agents.client.requests.post", return_value=_http_response(body={"response": '{"result": "ok"}'})) as mock_post:
            out = call_ai_agent("collect data", "agent-123")

        assert out == '{"result": "ok"}'
        kwargs = mock_post.call_args.kwargs
        assert kwargs["json"]["agent_id"] == "agent-123"
        assert kwargs["json"]["message"] == "collect data"
        assert kwargs["headers"]["x-api-key"] == "test-key"
        assert kwargs["timeout"] > 0

    def test_body_without_envelope_returned_whole(self):
        with patch("mql_dashboard.agents.client.requests.post", return_value=_http_response(body={"result": "direct"})):
            assert call_ai_agent("p", "a") == {"result": "direct"}

    def test_non_json_body_returned_as_text(self):
        with patch("mql_dashboard.agents.client.requests.post", return_value=_http_response(text="plain words")):
            assert call_ai_agent("p", "a") == "plain words"

    def test_http_error_status_raises(self):
        with patch("mql_dashboard.agents.client.requests.post", return_value=_http_response(status=500, text="boom")):
            with pytest.raises(AgentCallError, match="HTTP 500"):
                call_ai_agent("p", "a")

    def test_transport_error_raises(self):
        with patch("mql_dashboard.agents.client.requests.post", side_effect=requests.ConnectionError("down")):
            with pytest.raises(AgentCallError):
                call_ai_agent("p", "a")


class TestCallAIAgentFallback:

    def test_no_backend_configured(self):
        with pytest.raises(AgentCallError, match="No agent backend"):
            call_ai_agent("p", "a")

    def test_llm_stand_in(self):
        llm = MagicMock()
        llm.invoke.return_value = MagicMock(content=' {"result": "from llm"} ')
        with patch.object(client, "has_llm_key", return_value=True), patch.object(client, "get_llm", return_value=llm):
            assert call_ai_agent("summarise", "a") == '{"result": "from llm"}'
        messages = llm.invoke.call_args.args[0]
        assert messages[-1].content == "summarise"

    def test_llm_unavailable(self):
        with patch.object(client, "has_llm_key", return_value=True), patch.object(client, "get_llm", return_value=None):
            with pytest.raises(AgentCallError, match="LLM not available"):
                call_ai_agent("p", "a")

    def test_llm_invoke_failure_wrapped(self):
        llm = MagicMock()
        llm.invoke.side_effect = RuntimeError("rate limited")
        with patch.object(client, "has_llm_key", return_value=True), patch.object(client, "get_llm", return_value=llm):
            with pytest.raises(AgentCallError, match="rate limited"):
                call_ai_agent("p", "a")


# =============================================================================
# Response normalisation
# =============================================================================

class TestNormalisation:

    def test_collection_defaults(self):
        out = normalize_collection_response({})
        assert out == {
            "result": "",
            "confidence": 0.0,
            "metadata": {"processing_time": "", "messages_sent": 0, "responses_collected": 0, "collection_status": "initiated"},
        }

    def test_insight_defaults_for_garbage(self):
        out = normalize_insight_response("not a dict")
        assert out["metadata"]["dashboard_status"] == "processing"
        assert out["metadata"]["total_mqls"] == 0

    def test_bad_types_coerced(self):
        out = normalize_insight_response({
            "result": 123,
            "confidence": "0.8",
            "metadata": {"records_processed": "6", "total_mqls": "lots", "dashboard_status": "exploded", "extra": "kept"},
        })
        assert out["result"] == "123"
        assert out["confidence"] == 0.8
        assert out["metadata"]["records_processed"] == 6
        assert out["metadata"]["total_mqls"] == 0
        assert out["metadata"]["dashboard_status"] == "processing"
        assert out["metadata"]["extra"] == "kept"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), 10 ** 400, "1e400"])
    def test_non_finite_numbers_default(self, value):
        out = normalize_insight_response({"confidence": value, "metadata": {"records_processed": value, "total_mqls": 75}})
        assert out["confidence"] == 0.0
        assert out["metadata"]["records_processed"] == 0
        assert out["metadata"]["total_mqls"] == 75

    def test_negative_counts_clamped(self):
        out = normalize_collection_response({"metadata": {"messages_sent": -4, "collection_status": "completed"}})
        assert out["metadata"]["messages_sent"] == 0
        assert out["metadata"]["collection_status"] == "completed"

    def test_response_text_used_as_result(self):
        assert normalize_collection_response({"response": "Sent 5 requests"})["result"] == "Sent 5 requests"


class TestAgentWrappers:

    def test_collection_agent_parses_reply(self):
        raw = '```json\n{"result": "Requests sent", "confidence": 0.9, "metadata": {"messages_sent": 5}}\n```'
        with patch.object(client, "call_ai_agent", return_value=raw) as mock_call:
            out = call_collection_agent("prompt", "collector")
        mock_call.assert_called_once_with("prompt", "collector")
        assert out["result"] == "Requests sent"
        assert out["metadata"]["messages_sent"] == 5

    def test_collection_agent_failure_returns_none(self):
        with patch.object(client, "call_ai_agent", side_effect=AgentCallError("down")):
            assert call_collection_agent("prompt", "collector") is None

    def test_insights_agent_failure_returns_none(self):
        with patch.object(client, "call_ai_agent", side_effect=RuntimeError("unexpected")):
            assert call_insights_agent("prompt", "insights") is None

    def test_insights_agent_infinite_count_keeps_reply(self):
        raw = '{"result": "ok", "confidence": 0.9, "metadata": {"records_processed": Infinity, "total_mqls": 75}}'
        with patch.object(client, "call_ai_agent", return_value=raw):
            out = call_insights_agent("prompt", "insights")
        assert out is not None
        assert out["result"] == "ok"
        assert out["metadata"]["records_processed"] == 0
        assert out["metadata"]["total_mqls"] == 75

    def test_insights_agent_unparseable_reply_defaults(self):
        with patch.object(client, "call_ai_agent", return_value="I could not do that"):
            out = call_insights_agent("prompt", "insights")
        assert out["result"] == ""
        assert out["metadata"]["records_processed"] == 0
