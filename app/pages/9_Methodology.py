import streamlit as st

from staffrec.logger import configure_logging

configure_logging()

st.set_page_config(page_title="Methodology", layout="wide")
st.title("Methodology")

st.markdown(
    r"""
### Continuous estimate

\[
\text{staff} = 1.5 + 0.03\cdot\sqrt{\max(0, \text{area})} + \frac{\text{footfall}}{20000}
\]

- Grows with the square root of store area and linearly with mall footfall.
- Keep footfall in the same units as the historical staffing data (e.g. daily).

### Rounding policy

- **Ceil** (default, conservative), **Round** (half up) or **Floor** (minimal).
- Clamp up to \(\max(\text{min staff}, 1)\).
- Clamp down to max staff when set. Max staff is applied last, so it wins over min staff.

### Batch mode

- Every row uses the same rounding policy.
- Missing or empty area/footfall counts as 0.
- Non-numeric or infinite values give an empty `recommended_staff`; such rows are listed under *Rows with data issues*.
- Output adds `predicted_continuous` (3 decimals) and `recommended_staff` to each row.

This is a heuristic, not a trained model.
"""
)
