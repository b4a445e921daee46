"""
Cart Pricing Package

A small pricing calculation system for shopping carts.
Resolves order totals using Subtotal → Discounts → Shipping → Tax pipeline,
with a payout aggregator for settling transactions.
"""

__version__ = "1.0.0"
