import logging

import streamlit as st
from src.config import get_settings
from src.engine import (
    MIN_BEAN_WEIGHT,
    RATIOS,
    ROAST_LEVELS,
    UNITS,
    BrewParameters,
    clamp_bean_weight,
    generate_recipe,
    ratio_label,
    unit_label,
)
from src.logging_config import setup_logging


settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Cappuccino Calculator", page_icon="☕")

st.title("Cappuccino Calculator ☕")
st.caption("Perfect ratios for the perfect cup")

col1, col2 = st.columns(2)

with col1:
    bean_weight = st.number_input(
        "Coffee bean weight (g)",
        min_value=MIN_BEAN_WEIGHT,
        value=settings.default_bean_weight,
        step=0.5,
        key="bean_weight",
    )
    ratio = st.selectbox(
        "Coffee to water ratio",
        RATIOS,
        index=RATIOS.index(settings.default_ratio),
        format_func=ratio_label,
        key="ratio",
    )

with col2:
    roast_level = st.selectbox(
        "Roast level",
        ROAST_LEVELS,
        index=ROAST_LEVELS.index(settings.default_roast_level),
        key="roast_level",
    )
    unit = st.selectbox(
        "Measurement unit",
        UNITS,
        index=UNITS.index(settings.default_unit),
        format_func=unit_label,
        key="unit",
    )

params = BrewParameters(
    bean_weight=clamp_bean_weight(bean_weight),
    ratio=ratio,
    unit=unit,
    roast_level=roast_level,
)
recipe = generate_recipe(params)
logger.info(
    "recipe for %sg %s roast at %s: water=%s milk=%s",
    params.bean_weight, roast_level, recipe["ratio_label"],
    recipe["water_display"], recipe["milk_display"],
)

st.subheader("Your Recipe")
out1, out2 = st.columns(2)
with out1:
    st.write(f"**Water:** {recipe['water_display']}")
with out2:
    st.write(f"**Milk:** {recipe['milk_display']}")

st.divider()

st.subheader("Brewing Guide")
for i, s in enumerate(recipe["steps"], start=1):
    st.write(f"{i}. {s}")
