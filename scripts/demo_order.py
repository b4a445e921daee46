#!/usr/bin/env python
"""
Print the price breakdown of the example order.

Usage:
    python scripts/demo_order.py
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from cart_pricing.demo import main


if __name__ == "__main__":
    main()
