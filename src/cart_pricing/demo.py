"""
Example order: prices a laptop and two phones in Moscow.

Usage:
    python -m cart_pricing.demo [--trace] [--currency RUB]
"""
import argparse
from typing import Optional

from .config.settings import get_settings
from .engine import Cart, Discount, PriceBreakdown, Product, Region


def build_demo_cart() -> Cart:
    moscow = Region(code="MSK", tax_rate=0.20, shipping_rate=300)
    cart = Cart(moscow)

    laptop = Product(product_id="laptop-1", name="MacBook Pro", price=150000, weight=2.0, category="electronics")
    phone = Product(product_id="phone-1", name="iPhone 15", price=90000, weight=0.5, category="electronics")

    cart.add_item(laptop, 1)
    cart.add_item(phone, 2)

    # 10% off electronics from 200000, flat 5000 off from 100000
    cart.add_discount(Discount.percentage(10, category="electronics", min_amount=200000))
    cart.add_discount(Discount.fixed(5000, min_amount=100000))
    return cart


def run_demo(currency_label: Optional[str] = None, show_trace: bool = False) -> PriceBreakdown:
    """Print the five summary lines, optionally followed by the trace."""
    currency_label = currency_label or get_settings().currency_label
    breakdown = build_demo_cart().quote()

    print("Order details:")
    for line in breakdown.format_lines(currency_label):
        print(line)

    if show_trace:
        print()
        print(breakdown.get_trace_text())
    return breakdown


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Price the example order.")
    parser.add_argument("--trace", action="store_true", help="print every pricing step")
    parser.add_argument("--currency", default=None, help="currency label for amounts")
    args = parser.parse_args(argv)

    run_demo(currency_label=args.currency, show_trace=args.trace)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
