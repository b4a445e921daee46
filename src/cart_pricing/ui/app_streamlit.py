"""
Streamlit UI for cart pricing.

Features:
- Region and discount selection in the sidebar
- Editable quantities per catalog product
- Price breakdown metrics and resolution trace
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cart_pricing.data.catalog import Catalog
from cart_pricing.config.settings import get_settings


st.set_page_config(
    page_title="Cart Pricing",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_catalog():
    """Get cached catalog instance."""
    return Catalog.load()


try:
    catalog = get_catalog()
    settings = get_settings()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()

currency = settings.currency_label

# ============================================================================
# SIDEBAR: Region & Discounts
# ============================================================================
with st.sidebar:
    st.header("Order Context")

    region_codes = list(catalog.regions)
    default_index = region_codes.index(settings.default_region) if settings.default_region in region_codes else 0
    region_code = st.selectbox("Region", region_codes, index=default_index)
    region = catalog.get_region(region_code)
    st.caption(f"Tax rate: {region.tax_rate:.0%} · Shipping: {region.shipping_rate:g} {currency} per kg")

    st.divider()

    discount_ids = st.multiselect(
        "Discounts",
        list(catalog.discounts),
        format_func=lambda d: f"{d} ({catalog.discounts[d].kind.value} {catalog.discounts[d].value:g}, from {catalog.discounts[d].min_amount:g})",
    )

# ============================================================================
# MAIN: Cart
# ============================================================================
st.title("Cart Pricing")

cart_df = catalog.products_frame()
cart_df["quantity"] = 0

edited = st.data_editor(
    cart_df,
    disabled=["product_id", "name", "price", "weight", "category"],
    hide_index=True,
    use_container_width=True,
    key="cart_editor",
)

items = {
    row["product_id"]: int(row["quantity"])
    for _, row in edited.iterrows()
    if pd.notna(row["quantity"]) and int(row["quantity"]) != 0
}

if not items:
    st.info("Set a quantity on at least one product to price the cart.")
    st.stop()

breakdown = catalog.build_cart(region_code, items, discount_ids).quote()

col1, col2, col3, col4, col5 = st.columns(5)
col1.metric("Subtotal", f"{breakdown.subtotal:,.2f} {currency}")
col2.metric("Discounts", f"{breakdown.discounts:,.2f} {currency}")
col3.metric("Shipping", f"{breakdown.shipping:,.2f} {currency}")
col4.metric("Tax", f"{breakdown.tax:,.2f} {currency}")
col5.metric("Total", f"{breakdown.total:,.2f} {currency}")

if breakdown.after_discounts < 0:
    st.warning("Discounts exceed the subtotal; the discounted amount is negative.")

with st.expander("🔍 Resolution Details"):
    st.text(breakdown.get_trace_text())
