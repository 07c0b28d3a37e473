import streamlit as st
import plotly.express as px
import sys, os

# Ensure repo modules importable when running `streamlit run ui/app_streamlit.py`
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from crops.environment import ENVIRONMENT_FACTORS, LEVELS
from data.loaders import load_crops_csv, load_factors_csv, load_orders_csv, build_crops, build_orders
from decision.report import crop_summary, garden_totals
from decision.scenarios import yield_scenarios, yield_range


# -----------------------
# Page setup
# -----------------------
st.set_page_config(page_title="Vegetable Garden Planner", layout="wide")
st.title("Vegetable Garden Planner – Yield & Profit")
st.caption("Upload crops, factor sensitivities and planting orders, then tune the environment.")


# -----------------------
# Sidebar: inputs
# -----------------------
with st.sidebar:
    st.header("Data Uploads")
    up_crops = st.file_uploader("Crops CSV (columns: name,yield,cost,sale_price)", type=["csv"], key="crops")
    up_factors = st.file_uploader("Factors CSV (columns: crop,factor,level,percent)", type=["csv"], key="factors")
    up_orders = st.file_uploader("Orders CSV (columns: crop,quantity)", type=["csv"], key="orders")
    with st.expander("Download CSV templates"):
        tpl_crops = "name,yield,cost,sale_price\ncorn,3,10,5\npumpkin,4,5,4\n"
        tpl_factors = "crop,factor,level,percent\ncorn,sun,low,-50\npumpkin,wind,medium,30\n"
        tpl_orders = "crop,quantity\ncorn,5\npumpkin,2\n"
        st.download_button("Template: crops.csv", data=tpl_crops, file_name="crops_template.csv", mime="text/csv")
        st.download_button("Template: factors.csv", data=tpl_factors, file_name="factors_template.csv", mime="text/csv")
        st.download_button("Template: orders.csv", data=tpl_orders, file_name="orders_template.csv", mime="text/csv")


# -----------------------
# Load data (with sensible defaults)
# -----------------------
try:
    crops_df = load_crops_csv(up_crops)
    factors_df = load_factors_csv(up_factors)
    orders_df = load_orders_csv(up_orders)
    orders = build_orders(orders_df, build_crops(crops_df, factors_df))
except ValueError as e:
    st.error(f"Could not read inputs: {e}")
    st.stop()

factor_names = sorted(set(factors_df["factor"].astype(str)) | set(ENVIRONMENT_FACTORS))

with st.sidebar:
    st.header("Environment")
    environment = {}
    for factor in factor_names:
        seen = set(factors_df.loc[factors_df["factor"] == factor, "level"].astype(str))
        options = list(LEVELS) + sorted(seen - set(LEVELS))
        default = ENVIRONMENT_FACTORS.get(factor, "medium")
        environment[factor] = st.selectbox(
            factor.capitalize(), options, index=options.index(default) if default in options else 0
        )


# -----------------------
# Summary
# -----------------------
summary = crop_summary(orders, environment)

st.subheader("Garden Summary")
try:
    totals = garden_totals(orders, environment)
except ValueError as e:
    st.warning(f"Totals unavailable: {e}")
    totals = None

if totals:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total yield", f"{totals['total_yield']:,.2f}")
    c2.metric("Costs", f"{totals['total_cost']:,.2f}")
    c3.metric("Revenue", f"{totals['total_revenue']:,.2f}")
    c4.metric("Profit", f"{totals['total_profit']:,.2f}")

st.dataframe(summary)

fig = px.bar(summary, x="crop", y=["revenue", "adjusted_revenue", "cost"], barmode="group", title="Money by crop")
fig.update_yaxes(title_text="Amount")
st.plotly_chart(fig, use_container_width=True)
st.caption(
    "Revenue uses each crop's base yield; adjusted revenue applies the selected environment to the yield first."
)


# -----------------------
# Scenarios
# -----------------------
with st.expander("Yield across all environment scenarios"):
    try:
        scenarios = yield_scenarios(orders, {f: LEVELS for f in factor_names})
    except ValueError as e:
        st.warning(f"Scenarios unavailable: {e}")
    else:
        rng = yield_range(scenarios)
        k1, k2, k3 = st.columns(3)
        k1.metric("Worst case", f"{rng['min']:,.2f}")
        k2.metric("Average", f"{rng['mean']:,.2f}")
        k3.metric("Best case", f"{rng['max']:,.2f}")
        st.dataframe(scenarios.sort_values("total_yield", ascending=False).reset_index(drop=True))

with st.expander("Preview input data"):
    p1, p2, p3 = st.columns(3)
    p1.write("Crops")
    p1.dataframe(crops_df)
    p2.write("Factors")
    p2.dataframe(factors_df)
    p3.write("Orders")
    p3.dataframe(orders_df)
