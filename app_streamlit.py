import streamlit as st

from config import ConfigError, load_settings
from comparison.engine import (
    compare_vehicles,
    environmental_insight,
    recommendation_text,
    share_message,
    value_insight,
)
from comparison.report import rows_frame
from domain.features import CATEGORIES, compare_features
from services.favorites import FavoritesError, load_favorites

st.set_page_config(page_title="CarCompare — Side by side", layout="wide")

st.title("CarCompare — Compare two favorites")

MIN_YEAR, MAX_YEAR = 1950, 2100

try:
    settings = load_settings()
except ConfigError as e:
    st.error(f"Bad configuration: {e}")
    st.stop()

with st.sidebar:
    st.header("Favorites")
    favorites_path = st.text_input("Favorites file", value=settings.favorites_path)
    as_of_year = st.number_input("Reference year", min_value=MIN_YEAR, max_value=MAX_YEAR,
                                 value=min(max(settings.reference_year, MIN_YEAR), MAX_YEAR), step=1)
    years = st.number_input("Ownership years", min_value=1, max_value=15,
                            value=min(settings.projection_years, 15), step=1)

try:
    favorites = load_favorites(favorites_path)
except FavoritesError as e:
    st.error(f"Failed to load favorites: {e}")
    st.stop()

if len(favorites) < 2:
    st.warning("Add at least two cars to your favorites to compare them.")
    st.stop()

names = [f"{v.display_name} (#{v.id})" for v in favorites]
c1, c2 = st.columns(2)
with c1:
    i = st.selectbox("First car", range(len(favorites)), format_func=lambda k: names[k], index=0)
with c2:
    j = st.selectbox("Second car", range(len(favorites)), format_func=lambda k: names[k], index=1)

left, right = favorites[i], favorites[j]
result = compare_vehicles(left, right, as_of_year=int(as_of_year), years=int(years))

if result.evenly_matched:
    st.info(recommendation_text(result))
else:
    st.success(recommendation_text(result))

tab_basics, tab_features, tab_costs = st.tabs(["Basics", "Features", "Costs"])

with tab_basics:
    st.dataframe(rows_frame(result.rows, left.display_name, right.display_name), use_container_width=True)
    i1, i2 = st.columns(2)
    i1.markdown(f"**Value Score**  \n{value_insight(result)}")
    i2.markdown(f"**Environmental Impact**  \n{environmental_insight(result)}")
    m1, m2 = st.columns(2)
    for col, side in ((m1, result.left), (m2, result.right)):
        with col:
            st.subheader(side.vehicle.display_name)
            st.metric("Value score", f"{side.value_score:.0f}/100" if side.value_score is not None else "N/A")
            st.metric("Env. score", f"{side.environmental_score:.0f}/100" if side.environmental_score is not None else "N/A")
            st.write("**Pros**")
            for p in side.pros or ["—"]:
                st.write("•", p)
            st.write("**Cons**")
            for c in side.cons or ["—"]:
                st.write("•", c)
            if side.use_cases:
                st.write("**Best for:**", ", ".join(side.use_cases))

with tab_features:
    category = st.selectbox("Category", ["all", *CATEGORIES], index=0)
    rows = compare_features(left.features, right.features, None if category == "all" else category)
    if not rows:
        st.write("No feature information available for comparison")
    else:
        st.dataframe(
            [{"feature": r.meta.label, "importance": r.meta.importance,
              left.display_name: "✓" if r.has_left else "✗",
              right.display_name: "✓" if r.has_right else "✗"} for r in rows],
            use_container_width=True,
        )

with tab_costs:
    st.subheader("Depreciation")
    st.dataframe(rows_frame(result.depreciation_rows, left.display_name, right.display_name), use_container_width=True)
    st.subheader("Annual cost estimates")
    st.dataframe(rows_frame(result.cost_rows, left.display_name, right.display_name), use_container_width=True)
    st.caption("* Estimates are based on industry averages and may vary based on market conditions.")

with st.expander("Share"):
    st.code(share_message(result), language=None)
