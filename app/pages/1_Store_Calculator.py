from __future__ import annotations

import streamlit as st

from staffrec.heuristic import explain_estimate
from staffrec.logger import configure_logging
from staffrec.session import get_app_state
from staffrec.staffing import ROUND_RULES
from staffrec.validation import to_number

configure_logging()

ROUND_LABELS = {
    "ceil": "Ceil (conservative)",
    "round": "Round",
    "floor": "Floor (minimal)",
}

# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Store Calculator", layout="wide")
st.title("Store Calculator")
st.caption("Enter store details to get a recommended headcount.")

state = get_app_state()


# -----------------------------
# Sidebar controls (shared with the batch page)
# -----------------------------
with st.sidebar:
    st.header("Rounding policy")
    round_rule = st.selectbox(
        "Rounding",
        list(ROUND_RULES),
        index=list(ROUND_RULES).index(state.round_rule) if state.round_rule in ROUND_RULES else 0,
        format_func=lambda r: ROUND_LABELS.get(r, r),
    )
    min_staff = st.number_input("Min staff", min_value=0, value=int(state.min_staff), step=1)
    max_staff = st.text_input("Max staff (optional)", value=state.max_staff)

state.set_inputs(round_rule=round_rule, min_staff=int(min_staff), max_staff=max_staff.strip())


# -----------------------------
# Inputs
# -----------------------------
left, right = st.columns(2)

with left:
    square_footage = st.text_input("Square footage (sqft)", value=state.square_footage)
    mall_footfall = st.text_input("Mall footfall (same granularity as historical staff)", value=state.mall_footfall)
    state.set_inputs(square_footage=square_footage.strip(), mall_footfall=mall_footfall.strip())

    st.button("Calculate")
    result = state.calculate()

    if state.error:
        st.error(state.error)
    if state.max_below_min():
        st.warning("Max staff is below min staff; max staff wins.")
    if state.max_staff_ignored():
        st.warning("Max staff is not a number and is ignored (no upper bound).")

with right:
    st.subheader("Recommendation")
    if result is not None:
        st.metric("Recommended staff", f"{result.recommended}")
        st.caption(f"Estimated continuous value: {result.continuous:.3f}")

        parts = explain_estimate(to_number(square_footage), to_number(mall_footfall))
        st.markdown("**Why this estimate?**")
        st.markdown(
            f"""
- Base heuristic: {parts['base']:.3f}
- Area term, 0.03 × √area: {parts['area_term']:.3f}
- Footfall term, footfall / 20000: {parts['footfall_term']:.3f}
- Rounding rule and min/max enforced as per inputs.
"""
        )
    else:
        st.info("Fill inputs and press Calculate.")
