from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Dict, List, Optional

from ..data.catalog import UnknownDiscountError, UnknownProductError, UnknownRegionError
from .payouts_api import router as payouts_router
from .state import catalog

app = FastAPI(
    title="Cart Pricing API",
    description="Cart quoting and payout aggregation",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(payouts_router)


class QuoteRequest(BaseModel):
    region_code: str
    items: Dict[str, int]
    discount_ids: Optional[List[str]] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Cart Pricing API Active"}


@app.post("/quote")
async def quote(req: QuoteRequest):
    try:
        cart = catalog.build_cart(req.region_code, req.items, req.discount_ids)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=f"Unknown region: {e.args[0]}")
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=f"Unknown product: {e.args[0]}")
    except UnknownDiscountError as e:
        raise HTTPException(status_code=404, detail=f"Unknown discount: {e.args[0]}")
    return cart.quote().to_dict()


@app.get("/catalog/products")
async def get_products():
    return [
        {"product_id": p.product_id, "name": p.name, "price": p.price,
         "weight": p.weight, "category": p.category}
        for p in catalog.products.values()
    ]


@app.get("/catalog/regions")
async def get_regions():
    return [
        {"code": r.code, "tax_rate": r.tax_rate, "shipping_rate": r.shipping_rate}
        for r in catalog.regions.values()
    ]


@app.get("/catalog/discounts")
async def get_discounts():
    return [
        {"discount_id": d.discount_id, "kind": d.kind.value, "value": d.value,
         "category": d.category, "min_amount": d.min_amount}
        for d in catalog.discounts.values()
    ]


def run(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Serve the API with uvicorn (console script `cart-pricing-api`)."""
    import uvicorn

    print("Starting Cart Pricing API (FastAPI)...")
    uvicorn.run("cart_pricing.api.main:app", host=host, port=port, reload=reload)
