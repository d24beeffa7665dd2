from __future__ import annotations

import streamlit as st

from staffrec.batch import results_frame, summarize_batch
from staffrec.config import get_settings
from staffrec.io import SAMPLE_CSV
from staffrec.logger import configure_logging
from staffrec.session import get_app_state
from staffrec.validation import flag_batch_rows

configure_logging()

settings = get_settings()

st.set_page_config(page_title="Batch Upload", layout="wide")
st.title("Batch CSV Upload")

st.write(
    """
CSV must have a header row. Useful headers: `store_id`, `square_footage`, `mall_footfall`.

- Also accepted: `area` / `sqft` / `SQUARE_FOOTAGE` and `footfall` / `mallTraffic` / `MALL_FOOTFALL`
- Other columns pass through to the output unchanged
- Quoted fields are not supported (a comma always splits a field)
"""
)

state = get_app_state()
policy = state.policy()
st.caption(
    f"Rounding policy (set on the Store Calculator page): rule={policy.round_rule}, "
    f"min={policy.min_staff}, max={policy.max_staff if policy.max_staff is not None else 'none'}"
)

st.download_button("Download sample CSV", data=SAMPLE_CSV, file_name="sample_stores.csv", mime="text/csv")

uploaded = st.file_uploader("Upload store CSV", type=["csv"])
if uploaded is not None and st.session_state.get("loaded_file_id") != uploaded.file_id:
    state.load_csv(uploaded)
    st.session_state["loaded_file_id"] = uploaded.file_id

c1, c2 = st.columns(2)
with c1:
    if st.button("Process file"):
        state.process()
with c2:
    csv_text = state.download() if state.batch_results else None
    st.download_button(
        "Download results",
        data=csv_text or "",
        file_name=settings.output_filename,
        mime="text/csv",
        disabled=csv_text is None,
    )

if state.error:
    st.error(state.error)

if state.batch_rows:
    st.caption(f"Rows loaded: {len(state.batch_rows)}")

if state.batch_results:
    summary = summarize_batch(state.batch_results)

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Stores", f"{summary.rows}")
    m2.metric("Rows with data issues", f"{summary.flagged_rows}")
    m3.metric("Total recommended staff", f"{summary.total_recommended}")
    m4.metric("Mean continuous estimate", f"{summary.mean_continuous:.3f}")

    n = settings.preview_rows
    st.subheader(f"Sample output (first {n} rows)")
    st.dataframe(results_frame(state.batch_results, max_rows=n, max_columns=n), use_container_width=True)

    flags = flag_batch_rows(state.batch_rows)
    if flags["any_flag"].any():
        with st.expander("Rows with data issues", expanded=False):
            st.dataframe(flags[flags["any_flag"]], use_container_width=True)
