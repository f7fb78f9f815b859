"""MQL Dashboard - Streamlit entrypoint."""

import os
from datetime import date

import streamlit as st

from mql_dashboard.config import get_agent_api_key, load_dashboard_config
from mql_dashboard.llm.providers import has_llm_key
from mql_dashboard.tools.roster import seed_roster
from mql_dashboard.ui.sidebar import render_sidebar
from mql_dashboard.ui.dashboard import render_request_updates, render_overview, render_insights
from mql_dashboard.ui.team import render_team_activity

st.set_page_config(page_title="Marketing Dashboard — Weekly Activity & MQL Tracking", page_icon="🎯", layout="wide", initial_sidebar_state="expanded")

SESSION_KEYS = ("team_data", "insights", "previous_insights", "insights_error", "collection_status", "collection_ok")

# Roster lives for the browser session only
if "team_data" not in st.session_state:
    st.session_state["team_data"] = seed_roster()
    st.session_state["insights"] = None

if not get_agent_api_key() and not has_llm_key():
    st.error("Missing AGENT_API_KEY (or MISTRAL_API_KEY / OPENAI_API_KEY) in .env")

# Header
col_title, col_date, col_refresh = st.columns([6, 2, 1])
with col_title:
    st.title("🎯 Marketing Dashboard")
    st.caption(f"Weekly Activity & MQL Tracking · {load_dashboard_config()['team_name']}")
with col_date:
    selected = st.date_input("Week of", value=date.today(), key="selected_date")
with col_refresh:
    if st.button("🔄", key="refresh", help="Reset the dashboard"):
        for k in SESSION_KEYS:
            st.session_state.pop(k, None)
        st.rerun()

selected_date = selected.isoformat()

render_sidebar(selected_date)
render_request_updates(selected_date)

tab_overview, tab_team, tab_insights = st.tabs(["Overview", "Team Activity", "Insights"])

with tab_overview:
    render_overview()

with tab_team:
    render_team_activity()

with tab_insights:
    render_insights()

st.caption(f"Agent backend: {'hosted agents' if get_agent_api_key() else 'LLM stand-in' if has_llm_key() else 'not configured'} · debug log: {os.path.basename(os.getenv('DASHBOARD_DEBUG_LOG') or 'debug.log')}")
