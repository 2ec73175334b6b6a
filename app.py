# app.py
import logging

import pandas as pd
import streamlit as st

from match_core.config import DEFAULT_SCORING_YAML, parse_scoring_yaml, validate_scoring_config
from match_core.constants import DEFAULT_NUM_ATTENDEES, MAX_ATTENDEES
from match_core.errors import MatchError
from match_core.export_pdf import render_pdf
from match_core.generator import generate_attendees
from match_core.io import (
    attendees_to_dataframe,
    dataframe_to_attendees,
    generate_template_csv_bytes,
    load_attendees_csv,
    pairs_to_dataframe,
    save_csv_bytes,
)
from match_core.matcher import match_attendees
from match_core.report import format_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# ---------- Page ----------
st.set_page_config(page_title="Conference Attendee Matcher", layout="wide")


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("attendees_df", None)
    ss.setdefault("scoring_yaml", DEFAULT_SCORING_YAML)
    ss.setdefault("result", None)
    ss.setdefault("random_seed", 42)

_init_state()


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Scoring")
    st.session_state.scoring_yaml = st.text_area(
        "Scoring rules (YAML)",
        value=st.session_state.scoring_yaml,
        height=420,
    )
    method = st.radio("Solver", ["hungarian", "ilp"], horizontal=True,
                      help="Both are exact; ILP is slower and meant for cross-checking.")

    st.divider()
    st.subheader("📄 Files")
    st.download_button(
        "template.csv",
        data=generate_template_csv_bytes(),
        file_name="template.csv",
        mime="text/csv",
        use_container_width=True,
    )


st.title("Conference Attendee Matcher")
st.caption("Pairs every attendee with one partner, maximizing the total compatibility score.")

# ---------- 1) Attendees ----------
st.subheader("1) Attendees")
c1, c2 = st.columns([2, 1])
with c1:
    file = st.file_uploader("Upload attendees CSV", type=["csv"])
    if file is not None:
        try:
            st.session_state.attendees_df = attendees_to_dataframe(load_attendees_csv(file))
            st.success(f"Imported {len(st.session_state.attendees_df)} attendees.")
        except MatchError as e:
            st.error(f"Error loading CSV: {e}")
with c2:
    n = st.number_input("Attendees", min_value=2, max_value=MAX_ATTENDEES,
                        value=DEFAULT_NUM_ATTENDEES, step=1)
    seed = st.number_input("Random seed", min_value=0, max_value=10_000,
                           value=st.session_state.random_seed, step=1)
    if st.button("Generate sample attendees"):
        st.session_state.random_seed = seed
        st.session_state.attendees_df = attendees_to_dataframe(generate_attendees(int(n), seed=int(seed)))
        st.session_state.result = None

if st.session_state.attendees_df is None:
    st.info("No attendees loaded yet.")
    st.stop()

edited = st.data_editor(st.session_state.attendees_df, num_rows="dynamic", use_container_width=True)

# ---------- 2) Match ----------
st.subheader("2) Match")
if st.button("Find optimal pairs", type="primary"):
    try:
        config = parse_scoring_yaml(st.session_state.scoring_yaml)
        for issue in validate_scoring_config(config):
            st.warning(issue)
        attendees = dataframe_to_attendees(pd.DataFrame(edited))
        st.session_state.result = (match_attendees(attendees, config, method=method), attendees)
    except MatchError as e:
        st.session_state.result = None
        st.error(str(e))

if st.session_state.result is None:
    st.stop()

result, attendees = st.session_state.result
m1, m2, m3 = st.columns(3)
m1.metric("Total score", result.total_score)
m2.metric("Mutual pairs", len(result.mutual_pairs))
m3.metric("Below min score", sum(1 for p in result.pairs if p.score is None))

pairs_df = pairs_to_dataframe(result, attendees)
st.dataframe(pairs_df, use_container_width=True)

# ---------- 3) Export ----------
st.subheader("3) Export")
e1, e2, e3 = st.columns(3)
with e1:
    st.download_button("pairs.csv", data=save_csv_bytes(pairs_df), file_name="pairs.csv", mime="text/csv")
with e2:
    st.download_button("pairs.pdf", data=render_pdf(pairs_df), file_name="pairs.pdf", mime="application/pdf")
with e3:
    st.download_button("report.txt", data=format_report(result, attendees).encode("utf-8"),
                       file_name="report.txt", mime="text/plain")
