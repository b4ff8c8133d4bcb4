"""
TapWatch · Main Streamlit Dashboard
=====================================
Drinking-Water Quality Report by Zip Code

Entry point: streamlit run app.py
"""

import streamlit as st
from datetime import datetime

# ── Internal imports ──────────────────────────────────────────────────────────
from config.settings import Settings, build_client, configure_logging

from data_fetch.report_pipeline import ReportPipeline, STATUS_OK

from visualization.report_cards import (
    REPORT_CSS,
    build_cards_html,
    build_summary_html,
    format_system_option,
)
from visualization.guideline_chart import build_multiplier_chart
from visualization.report_table import build_contaminant_table, table_to_csv

# ─────────────────────────────────────────────────────────────────────────────
# Page config
# ─────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="TapWatch · Tap Water Report",
    page_icon="💧",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(REPORT_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────────────────────
# Provider client shared by the server process; pipeline per browser session
# ─────────────────────────────────────────────────────────────────────────────
@st.cache_resource(show_spinner=False)
def get_client():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return build_client(settings)


# ─────────────────────────────────────────────────────────────────────────────
# Session state defaults
# ─────────────────────────────────────────────────────────────────────────────
if "pipeline" not in st.session_state:
    # Own request sequencer per session: last-request-wins applies per user.
    st.session_state["pipeline"] = ReportPipeline(get_client())
if "outcome" not in st.session_state:
    st.session_state["outcome"] = None
if "fetched_at" not in st.session_state:
    st.session_state["fetched_at"] = None

pipeline = st.session_state["pipeline"]


def _store(outcome):
    # None means a newer request already replaced this one.
    if outcome is not None:
        st.session_state["outcome"] = outcome
        st.session_state["fetched_at"] = datetime.now()


# ─────────────────────────────────────────────────────────────────────────────
# Sidebar
# ─────────────────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("""
    <div style="text-align:center;padding:8px 0;">
      <span style="font-size:2.2rem;">💧</span><br>
      <span style="font-size:1.3rem;font-weight:700;color:#1a73e8;">TapWatch</span><br>
      <span style="font-size:0.72rem;color:#888;">Drinking-Water Quality Report</span>
    </div>
    """, unsafe_allow_html=True)
    st.divider()

    with st.form("zip-form"):
        zip_code = st.text_input("📍 Zip Code", max_chars=10, placeholder="e.g. 90210")
        submitted = st.form_submit_button("🔍 Get Report", type="primary")

    if submitted:
        with st.spinner("Fetching your water report…"):
            _store(pipeline.search(zip_code))

    st.divider()
    st.markdown("**🔗 Data Sources**")
    st.markdown("""
    <div style="font-size:0.78rem;line-height:1.8;color:#555;">
      🟢 <b>EWG Tap Water Database</b> · Contaminants<br>
      🟢 <b>EPA Envirofacts (SDWIS)</b> · Population, source water<br>
      <span style="color:#2ecc71;font-weight:600;">All public data · No API keys</span>
    </div>
    """, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────────────────────
st.title("💧 TapWatch · What's in Your Tap Water?")

outcome = st.session_state["outcome"]

if outcome is None:
    st.markdown("""
    <div style="background:linear-gradient(135deg,#e0f2fe,#f0f9ff);border-radius:12px;
                padding:28px 32px;margin-top:10px;border:1px solid #bae6fd;">
      <h3 style="margin-top:0;color:#0369a1;">🚰 How to use TapWatch</h3>
      <ol style="line-height:2.0;color:#334155;">
        <li>Enter your <b>zip code</b> in the sidebar</li>
        <li>See which contaminants in your utility's water <b>exceed EWG health guidelines</b></li>
        <li>Switch to <b>other water providers</b> serving the same zip code</li>
      </ol>
    </div>
    """, unsafe_allow_html=True)
    st.stop()

if outcome.status != STATUS_OK:
    st.error(outcome.message)
    st.stop()

view = outcome.report
fetched_at = st.session_state.get("fetched_at")
if fetched_at:
    st.caption(f"Zip {outcome.zip_code} · fetched {fetched_at.strftime('%d %B %Y · %H:%M')}")

# ─────────────────────────────────────────────────────────────────────────────
# ① Summary
# ─────────────────────────────────────────────────────────────────────────────
st.markdown(build_summary_html(view), unsafe_allow_html=True)

if view.note:
    st.info(view.note, icon="ℹ️")

st.divider()

# ─────────────────────────────────────────────────────────────────────────────
# ② Contaminant cards (toggle)
# ─────────────────────────────────────────────────────────────────────────────
if not view.note:
    st.subheader(f"Contaminants Detected in {view.system.display_name}")
    tab = st.radio(
        "Show",
        ["Exceeds Guidelines", "Others Detected"],
        horizontal=True,
        label_visibility="collapsed",
        key=f"toggle-{view.system.identifier}",
    )
    showing_exceeding = tab == "Exceeds Guidelines"
    rows = view.exceeding_rows if showing_exceeding else view.other_rows

    cards_col, chart_col = st.columns([1.2, 1.0], gap="medium")
    with cards_col:
        st.markdown(build_cards_html(rows, exceeding=showing_exceeding), unsafe_allow_html=True)
    with chart_col:
        fig = build_multiplier_chart(view.exceeding_rows)
        if fig is not None:
            st.markdown("**How far above the health guideline**")
            st.plotly_chart(fig, use_container_width=True)

    with st.expander("📋 All contaminants (table)"):
        df = build_contaminant_table(view)
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.download_button(
            "Download CSV",
            table_to_csv(df),
            file_name=f"tapwatch_{view.system.identifier}.csv",
            mime="text/csv",
        )

# ─────────────────────────────────────────────────────────────────────────────
# ③ Other water providers in the area
# ─────────────────────────────────────────────────────────────────────────────
if outcome.alternates:
    st.divider()
    st.subheader("View other water providers in your area")
    pick_col, btn_col = st.columns([3, 1])
    with pick_col:
        choice = st.selectbox(
            "Water provider",
            range(len(outcome.alternates)),
            format_func=lambda i: format_system_option(outcome.alternates[i]),
            label_visibility="collapsed",
        )
    with btn_col:
        if st.button("View Report"):
            chosen = outcome.alternates[choice]
            with st.spinner(f"Fetching report for {chosen.display_name}…"):
                _store(pipeline.select(chosen, outcome.alternates, zip_code=outcome.zip_code))
            st.rerun()
