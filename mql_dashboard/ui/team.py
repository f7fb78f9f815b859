"""
MQL Dashboard - Team Activity tab.
"""

from __future__ import annotations

import streamlit as st
import pandas as pd

from mql_dashboard.tools.roster import status_config
from mql_dashboard.ui.components import team_activity_card


def render_team_activity():
    """Activity cards for the whole roster, then a table and MQL chart."""
    roster = st.session_state["team_data"]
    st.subheader("Team Activity")
    cols = st.columns(3)
    for i, member in enumerate(roster):
        with cols[i % 3]:
            team_activity_card(member)

    if not roster:
        return
    st.markdown("---")
    df = pd.DataFrame([
        {
            "Name": m.get("name", ""),
            "Status": status_config(m.get("status", ""))["label"],
            "MQLs": int(m.get("mql_count") or 0),
            "Reminders": int(m.get("reminders") or 0),
            "Submitted": m.get("timestamp") or "",
        }
        for m in roster
    ])
    st.dataframe(df, width="stretch", hide_index=True)
    st.bar_chart(df.set_index("Name")["MQLs"])
    st.caption("MQLs by team member")
