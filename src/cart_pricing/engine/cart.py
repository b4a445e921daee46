"""
Cart - Core cart pricing pipeline with traceability.

Computes a cart's total from its line items, discounts and region:
- Subtotal from price × quantity
- Additive percentage/fixed discounts gated on the subtotal
- Weight-based shipping
- Tax on the discounted subtotal plus shipping
"""
from typing import Optional

from .models import CartItem, Discount, DiscountKind, PriceBreakdown, Product, Region


class Cart:
    """
    A shopping cart priced for a single region.

    Pricing order:
    1. Subtotal = sum of price × quantity
    2. Discounts computed against the subtotal (all applied, never clamped)
    3. After discounts = subtotal - discounts
    4. Shipping = total weight × region shipping rate
    5. Tax = (after discounts + shipping) × region tax rate
    6. Total = after discounts + shipping + tax

    Inputs are not validated: negative quantities, prices or rates are
    carried through the arithmetic as given.
    """

    def __init__(self, region: Region):
        self.region = region
        self.items: list[CartItem] = []
        self.discounts: list[Discount] = []

    def add_item(self, product: Product, quantity: int):
        """Add a product, merging into an existing line with the same product id."""
        existing = self.get_item(product.product_id)
        if existing is not None:
            existing.quantity += quantity
            return
        self.items.append(CartItem(product=product, quantity=quantity))

    def add_discount(self, discount: Discount):
        self.discounts.append(discount)

    def get_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product.product_id == product_id:
                return item
        return None

    @property
    def item_count(self) -> int:
        """Number of distinct lines in the cart."""
        return len(self.items)

    def calculate_subtotal(self) -> float:
        return sum((item.line_total for item in self.items), 0.0)

    def calculate_category_subtotal(self, category: str) -> float:
        """Subtotal restricted to items of the given category."""
        return sum(
            (item.line_total for item in self.items if item.product.category == category),
            0.0,
        )

    def calculate_discounts(self, subtotal: float) -> float:
        """
        Sum all discounts whose minimum is met by `subtotal`.

        The gate always uses the pre-discount cart subtotal passed in,
        never a running total or a category subtotal.
        """
        total_discount = 0.0
        for discount in self.discounts:
            if subtotal < discount.min_amount:
                continue
            total_discount += self._discount_amount(discount, subtotal)
        return total_discount

    def _discount_amount(self, discount: Discount, subtotal: float) -> float:
        if discount.kind == DiscountKind.FIXED:
            return discount.value

        if discount.category:
            base = self.calculate_category_subtotal(discount.category)
        else:
            base = subtotal
        return base * (discount.value / 100)

    def calculate_shipping(self) -> float:
        total_weight = sum((item.line_weight for item in self.items), 0.0)
        return total_weight * self.region.shipping_rate

    def calculate_tax(self, amount: float) -> float:
        """Tax on whatever base the caller passes in."""
        return amount * self.region.tax_rate

    def calculate_total(self) -> float:
        subtotal = self.calculate_subtotal()
        discounts = self.calculate_discounts(subtotal)
        after_discounts = subtotal - discounts
        shipping = self.calculate_shipping()
        tax = self.calculate_tax(after_discounts + shipping)
        return after_discounts + shipping + tax

    def quote(self) -> PriceBreakdown:
        """
        Run the full pricing pipeline with a trace of every step.

        Returns:
            PriceBreakdown whose total equals calculate_total()
        """
        subtotal = self.calculate_subtotal()

        trace_steps = []
        for item in self.items:
            trace_steps.append((
                "Line",
                f"{item.product.product_id}: {item.quantity} × {item.product.price:.2f}",
                f"{item.line_total:.2f}",
            ))
        trace_steps.append(("Subtotal", f"{len(self.items)} line(s)", f"{subtotal:.2f}"))

        discounts = 0.0
        for discount in self.discounts:
            if subtotal < discount.min_amount:
                trace_steps.append((
                    "Discount Skipped",
                    f"{discount.label} requires subtotal ≥ {discount.min_amount:.2f}",
                    None,
                ))
                continue
            amount = self._discount_amount(discount, subtotal)
            discounts += amount
            trace_steps.append(("Discount Applied", discount.label, f"{amount:.2f}"))

        after_discounts = subtotal - discounts
        shipping = self.calculate_shipping()
        tax = self.calculate_tax(after_discounts + shipping)
        total = after_discounts + shipping + tax

        trace_steps.append(("After Discounts", f"{subtotal:.2f} - {discounts:.2f}", f"{after_discounts:.2f}"))
        trace_steps.append(("Shipping", f"Region {self.region.code} at {self.region.shipping_rate:g} per unit weight", f"{shipping:.2f}"))
        trace_steps.append(("Tax", f"{self.region.tax_rate:g} × {after_discounts + shipping:.2f}", f"{tax:.2f}"))
        trace_steps.append(("Total", "after discounts + shipping + tax", f"{total:.2f}"))

        breakdown = PriceBreakdown(
            region_code=self.region.code,
            subtotal=subtotal,
            discounts=discounts,
            after_discounts=after_discounts,
            shipping=shipping,
            tax=tax,
            total=total,
        )
        for step, desc, val in trace_steps:
            breakdown.add_trace(step, desc, val)
        return breakdown
