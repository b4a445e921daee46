"""
Data models for the cart pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DiscountKind(str, Enum):
    """Closed set of discount kinds."""
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Product:
    """A product that can be placed in a cart."""
    product_id: str
    name: str
    price: float
    weight: float
    category: str = ""


@dataclass
class CartItem:
    """A product together with the quantity held in the cart."""
    product: Product
    quantity: int

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity

    @property
    def line_weight(self) -> float:
        return self.product.weight * self.quantity


@dataclass(frozen=True)
class Discount:
    """
    A discount rule attached to a cart.

    `category` is only read by percentage discounts; an empty category
    means the discount applies to the whole cart.
    """
    kind: DiscountKind
    value: float
    category: str = ""
    min_amount: float = 0.0
    discount_id: Optional[str] = None

    def __post_init__(self):
        # Accept plain strings ("percentage"/"fixed"), reject anything else
        object.__setattr__(self, 'kind', DiscountKind(self.kind))

    @classmethod
    def percentage(cls, value: float, category: str = "", min_amount: float = 0.0,
                   discount_id: Optional[str] = None) -> 'Discount':
        return cls(DiscountKind.PERCENTAGE, value, category, min_amount, discount_id)

    @classmethod
    def fixed(cls, value: float, min_amount: float = 0.0,
              discount_id: Optional[str] = None) -> 'Discount':
        return cls(DiscountKind.FIXED, value, "", min_amount, discount_id)

    @property
    def label(self) -> str:
        """Short human-readable name used in traces."""
        if self.discount_id:
            return self.discount_id
        if self.kind == DiscountKind.FIXED:
            return f"fixed {self.value:g}"
        scope = self.category or "cart"
        return f"{self.value:g}% {scope}"


@dataclass(frozen=True)
class Region:
    """Region with its tax rate (fraction) and shipping rate per unit weight."""
    code: str
    tax_rate: float
    shipping_rate: float


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class PriceBreakdown:
    """Complete result of a cart pricing calculation."""
    region_code: str
    subtotal: float
    discounts: float
    after_discounts: float
    shipping: float
    tax: float
    total: float
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the breakdown trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def format_lines(self, currency_label: str) -> list[str]:
        """The five summary lines: subtotal, discounts, shipping, tax, total."""
        return [
            f"Subtotal: {self.subtotal:.2f} {currency_label}",
            f"Discounts: {self.discounts:.2f} {currency_label}",
            f"Shipping: {self.shipping:.2f} {currency_label}",
            f"Tax: {self.tax:.2f} {currency_label}",
            f"Total: {self.total:.2f} {currency_label}",
        ]

    def to_dict(self) -> dict:
        """Convert to a plain dict for JSON responses."""
        return {
            "region": self.region_code,
            "subtotal": self.subtotal,
            "discounts": self.discounts,
            "after_discounts": self.after_discounts,
            "shipping": self.shipping,
            "tax": self.tax,
            "total": self.total,
            "trace": [
                {"step": t.step, "description": t.description, "value": t.value}
                for t in self.trace
            ],
        }
