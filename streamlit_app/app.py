from __future__ import annotations

import json

import altair as alt
import pandas as pd
import streamlit as st

from tidydocs_pipeline import clean_csv_text
from tidydocs_pipeline.aggregate.totals import format_total
from tidydocs_pipeline.config import get_settings

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="CSV → PDF Report Cleaner", layout="wide")
st.title("🧾 CSV Report Cleaner")
st.caption("Turn raw rows into a clean table ready for a client-facing report.")

settings = get_settings()


# =====================================================
# Helpers
# =====================================================
def kpi(label: str, value) -> None:
    """Display a simple KPI metric in the dashboard.

    Args:
        label: Metric label.
        value: Metric value (displayed as-is).
    """
    st.metric(label, value)


def outcome_frame(stats) -> pd.DataFrame:
    """Row outcome counts for the cleaning summary chart."""
    return pd.DataFrame(
        [
            {"outcome": "Kept", "rows": stats.cleaned_rows},
            {"outcome": "Removed (blank/incomplete)", "rows": stats.removed_blank},
            {"outcome": "Repaired", "rows": stats.repaired_rows},
            {"outcome": "Invalid dates", "rows": stats.invalid_dates},
        ]
    )


# =====================================================
# SECTION 0 — UPLOAD
# =====================================================
uploaded = st.file_uploader("Drop a CSV file", type=["csv"])

if uploaded is None:
    st.info("Upload a CSV file to preview the cleaned table.")
    st.stop()

try:
    text = uploaded.getvalue().decode(settings.input_encoding)
except UnicodeDecodeError as exc:
    st.error(f"Could not decode `{uploaded.name}` as {settings.input_encoding}: {exc}")
    st.stop()

result = clean_csv_text(text)
stats = result.stats

# =====================================================
# SECTION 1 — SUMMARY
# =====================================================
st.header("📌 Summary")

c1, c2, c3, c4 = st.columns(4)
with c1:
    kpi("Original Rows", stats.original_rows)
with c2:
    kpi("Cleaned Rows", stats.cleaned_rows)
with c3:
    kpi("Total Amount", format_total(stats))
with c4:
    kpi("Invalid Dates", stats.invalid_dates)

chart = (
    alt.Chart(outcome_frame(stats))
    .mark_bar()
    .encode(
        x=alt.X("outcome:N", title=None, sort=None),
        y=alt.Y("rows:Q", title="Rows"),
        tooltip=["outcome:N", "rows:Q"],
    )
    .properties(height=260)
)
st.altair_chart(chart, width="stretch")

st.divider()

# =====================================================
# SECTION 2 — CLEANED TABLE
# =====================================================
st.header("📋 Cleaned Data")

stem = uploaded.name.rsplit(".", 1)[0]

if result.dataset.is_empty:
    st.warning("No complete rows (date and description) were found. Nothing to export.")
else:
    df = result.dataset.to_pandas()
    st.dataframe(df, width="stretch")
    st.download_button(
        "Download cleaned CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=f"{stem}_clean.csv",
        mime="text/csv",
    )

st.download_button(
    "Download stats (JSON)",
    data=json.dumps(stats.model_dump(mode="json"), indent=2),
    file_name=f"{stem}_stats.json",
    mime="application/json",
)

# =====================================================
# Footer
# =====================================================
st.caption("Cleaning runs locally • pandas • Streamlit")
