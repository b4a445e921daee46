#!/usr/bin/env python
"""
Run the Cart Pricing API with auto-reload.

Usage:
    python scripts/run_api.py
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from cart_pricing.api.main import run


if __name__ == "__main__":
    try:
        run(reload=True)
    except KeyboardInterrupt:
        print("\nAPI stopped.")
