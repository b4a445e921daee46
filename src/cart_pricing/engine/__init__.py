"""Engine subpackage - core cart pricing logic."""
from .cart import Cart
from .models import CartItem, Discount, DiscountKind, PriceBreakdown, Product, Region

__all__ = ['Cart', 'CartItem', 'Discount', 'DiscountKind', 'PriceBreakdown', 'Product', 'Region']
