import pytest
import sys
import os
from pathlib import Path

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from cart_pricing.config.settings import Settings
from cart_pricing.data.catalog import (
    Catalog,
    UnknownDiscountError,
    UnknownProductError,
    UnknownRegionError,
    load_discounts,
)
from cart_pricing.engine import DiscountKind


@pytest.fixture(scope="module")
def catalog():
    return Catalog.load()


def test_bundled_reference_data(catalog):
    assert {"laptop-1", "phone-1"} <= set(catalog.products)
    assert catalog.get_region("MSK").tax_rate == 0.20
    assert catalog.get_region("MSK").shipping_rate == 300
    assert catalog.get_discount("FIXED5000").kind == DiscountKind.FIXED
    assert catalog.get_discount("ELEC10").category == "electronics"


def test_build_cart_prices_demo_order(catalog):
    cart = catalog.build_cart("MSK", {"laptop-1": 1, "phone-1": 2}, ["ELEC10", "FIXED5000"])
    assert abs(cart.calculate_total() - 351480) < 0.01


def test_unknown_ids_raise(catalog):
    with pytest.raises(UnknownRegionError):
        catalog.build_cart("NOWHERE", {"laptop-1": 1})
    with pytest.raises(UnknownProductError):
        catalog.build_cart("MSK", {"toaster": 1})
    with pytest.raises(UnknownDiscountError):
        catalog.build_cart("MSK", {"laptop-1": 1}, ["NOPE"])


def test_missing_files_raise(tmp_path):
    settings = Settings.load(data_dir=tmp_path)
    with pytest.raises(FileNotFoundError):
        Catalog.load(settings)


def test_custom_data_dir(tmp_path):
    (tmp_path / "products.csv").write_text(
        "product_id,name,price,weight,category\n"
        " tea ,Green Tea,300,0.1,grocery\n"
        "tea,Duplicate,1,1,grocery\n"
    )
    (tmp_path / "regions.csv").write_text("code,tax_rate,shipping_rate\nEKB,0.1,100\n")
    (tmp_path / "discounts.csv").write_text(
        "discount_id,kind,value,category,min_amount\n"
        "TEA,Percentage,50,grocery,\n"
    )
    catalog = Catalog.load(Settings.load(data_dir=tmp_path))

    assert catalog.get_product("tea").name == "Green Tea"
    assert catalog.get_discount("TEA").min_amount == 0.0

    cart = catalog.build_cart("EKB", {"tea": 2}, ["TEA"])
    # 600 - 300 + 0.2 × 100 = 320, tax 32
    assert abs(cart.calculate_total() - 352) < 0.01


def test_unknown_discount_kind_rejected(tmp_path):
    path = tmp_path / "discounts.csv"
    path.write_text("discount_id,kind,value,category,min_amount\nX,bogo,1,,0\n")
    with pytest.raises(ValueError):
        load_discounts(path)


def test_products_frame(catalog):
    df = catalog.products_frame()
    assert list(df.columns) == ["product_id", "name", "price", "weight", "category"]
    assert len(df) == len(catalog.products)
