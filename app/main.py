# app/main.py
import asyncio
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .config import ServerConfig
from .core import health_logic, list_products_logic, problem
from .models import ProductResponse

app = FastAPI(title="catalog-viewer products API (in-memory demo)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.error("An unhandled exception occurred on {}: {}", request.url.path, exc)
    return problem(500, "An error occurred", "An unexpected error occurred while processing your request")


# ---------------------------
# Product endpoints
# ---------------------------
@app.get(
    "/api/products",
    name="GetProducts",
    tags=["Products"],
    response_model=ProductResponse,
    responses={404: {}, 408: {}, 500: {}},
)
async def get_products():
    try:
        logger.info("Fetching products at {}", datetime.now(timezone.utc).isoformat())
        products = await asyncio.wait_for(
            list_products_logic(), timeout=ServerConfig.REQUEST_TIMEOUT_SECONDS
        )

        if not products:
            logger.warning("No products found")
            return JSONResponse(status_code=404, content={"message": "No products available"})

        logger.info("Successfully retrieved {} products", len(products))
        return ProductResponse(data=products, count=len(products))
    except asyncio.TimeoutError:
        logger.warning("Request was cancelled (timeout)")
        return problem(408, "Request Timeout", "The request was cancelled due to timeout")
    except Exception as e:
        logger.exception("Error occurred while fetching products: {}", e)
        return problem(500, "Internal Server Error", "An error occurred while processing your request")


# ---------------------------
# Health
# ---------------------------
@app.get("/health", name="HealthCheck", tags=["Health"])
async def health():
    logger.info("Health check requested")
    return health_logic()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=ServerConfig.SERVER_HOST, port=ServerConfig.SERVER_PORT)
