import streamlit as st

from staffrec.logger import configure_logging

configure_logging()

st.set_page_config(page_title="Store Staffing Recommendation", layout="wide")

st.title("Store Staffing Recommendation")
st.write(
    """
This app recommends a **staff headcount per store** from square footage and mall footfall.

Included:
- Store Calculator (single store, with rounding rule + min/max staff)
- Batch Upload (CSV in, `staff_recommendations.csv` out)
- Methodology (the heuristic and rounding policy)
"""
)

st.info("Use the left sidebar to navigate to the calculator or the batch upload.")
