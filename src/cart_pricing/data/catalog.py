"""
Catalog - Loads products, regions and named discounts from CSV.

Builds ready-to-price carts from a {product_id: quantity} request.
"""
import pandas as pd
from pathlib import Path
from typing import Optional

from ..config.logging_config import get_logger
from ..config.settings import get_settings, Settings
from ..engine.cart import Cart
from ..engine.models import Discount, Product, Region

logger = get_logger(__name__)


class UnknownProductError(KeyError):
    """Product id not present in the catalog."""


class UnknownRegionError(KeyError):
    """Region code not present in the catalog."""


class UnknownDiscountError(KeyError):
    """Discount id not present in the catalog."""


def _read_table(path: Path, required: list[str]) -> pd.DataFrame:
    """Read a CSV as strings with stripped headers and values."""
    if not path.exists():
        raise FileNotFoundError(f"{path.name} not found at {path}.")

    df = pd.read_csv(path, dtype=str).fillna('')
    df.columns = [c.strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")
    return df


def load_products(path: Path) -> dict[str, Product]:
    df = _read_table(path, ['product_id', 'name', 'price', 'weight', 'category'])
    # Duplicate ids keep the first row
    df = df.drop_duplicates('product_id')
    return {
        row.product_id: Product(
            product_id=row.product_id,
            name=row.name,
            price=float(row.price),
            weight=float(row.weight),
            category=row.category,
        )
        for row in df.itertuples(index=False)
    }


def load_regions(path: Path) -> dict[str, Region]:
    df = _read_table(path, ['code', 'tax_rate', 'shipping_rate'])
    df = df.drop_duplicates('code')
    return {
        row.code: Region(code=row.code, tax_rate=float(row.tax_rate), shipping_rate=float(row.shipping_rate))
        for row in df.itertuples(index=False)
    }


def load_discounts(path: Path) -> dict[str, Discount]:
    """Load named discounts; an unknown kind raises ValueError."""
    df = _read_table(path, ['discount_id', 'kind', 'value', 'category', 'min_amount'])
    df = df.drop_duplicates('discount_id')
    discounts = {}
    for row in df.itertuples(index=False):
        discounts[row.discount_id] = Discount(
            kind=row.kind.lower(),
            value=float(row.value),
            category=row.category,
            min_amount=float(row.min_amount) if row.min_amount else 0.0,
            discount_id=row.discount_id,
        )
    return discounts


class Catalog:
    """Reference data used to assemble carts by id."""

    def __init__(self, products: dict[str, Product], regions: dict[str, Region],
                 discounts: dict[str, Discount]):
        self.products = products
        self.regions = regions
        self.discounts = discounts

    @classmethod
    def load(cls, settings: Optional[Settings] = None) -> 'Catalog':
        """Load all three tables from the configured CSV paths."""
        settings = settings or get_settings()
        catalog = cls(
            products=load_products(settings.products_csv),
            regions=load_regions(settings.regions_csv),
            discounts=load_discounts(settings.discounts_csv),
        )
        logger.info(
            "catalog.loaded",
            data_dir=str(settings.data_dir),
            products=len(catalog.products),
            regions=len(catalog.regions),
            discounts=len(catalog.discounts),
        )
        return catalog

    def get_product(self, product_id: str) -> Product:
        try:
            return self.products[str(product_id).strip()]
        except KeyError:
            raise UnknownProductError(product_id) from None

    def get_region(self, code: str) -> Region:
        try:
            return self.regions[str(code).strip()]
        except KeyError:
            raise UnknownRegionError(code) from None

    def get_discount(self, discount_id: str) -> Discount:
        try:
            return self.discounts[str(discount_id).strip()]
        except KeyError:
            raise UnknownDiscountError(discount_id) from None

    def build_cart(self, region_code: str, items: dict[str, int],
                   discount_ids: Optional[list[str]] = None) -> Cart:
        """
        Assemble a cart from ids.

        Args:
            region_code: Region code, e.g. "MSK"
            items: Dict of {product_id: quantity}
            discount_ids: Named discounts to attach, in order

        Raises:
            UnknownRegionError, UnknownProductError, UnknownDiscountError
        """
        cart = Cart(self.get_region(region_code))
        for product_id, qty in items.items():
            cart.add_item(self.get_product(product_id), int(qty))
        for discount_id in discount_ids or []:
            cart.add_discount(self.get_discount(discount_id))
        return cart

    def products_frame(self) -> pd.DataFrame:
        """Products as a DataFrame, for display."""
        return pd.DataFrame(
            [
                {"product_id": p.product_id, "name": p.name, "price": p.price,
                 "weight": p.weight, "category": p.category}
                for p in self.products.values()
            ],
            columns=["product_id", "name", "price", "weight", "category"],
        )
