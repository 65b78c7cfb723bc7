import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi.responses import JSONResponse

from .config import ServerConfig
from .database import PRODUCTS
from .models import Product

# This file contains the logic behind the API endpoints.


def problem(status: int, title: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"type": "about:blank", "title": title, "status": status, "detail": detail},
        media_type="application/problem+json",
    )


# Product endpoints
async def list_products_logic() -> List[Product]:
    # stands in for a database round trip
    await asyncio.sleep(ServerConfig.SIMULATED_LATENCY_SECONDS)
    return list(PRODUCTS)


# Health
def health_logic() -> Dict[str, Any]:
    return {"status": "Healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
