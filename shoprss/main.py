"""
FastAPI application entry point.
"""

from fastapi import FastAPI

from shoprss import __version__
from shoprss.api.feeds import router as feeds_router
from shoprss.schemas.common import HealthResponse


app = FastAPI(
    title="Fortnite Shop RSS",
    description="RSS 2.0 feed of the current Fortnite item shop",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True)


# Catch-all feed route, registered last
app.include_router(feeds_router)
