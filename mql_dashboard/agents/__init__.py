from mql_dashboard.agents.client import AgentCallError, call_ai_agent
from mql_dashboard.agents.parsing import parse_llm_json
from mql_dashboard.agents.responses import call_collection_agent, call_insights_agent
from mql_dashboard.agents.workflow import run_collection, run_insights, build_snapshot
