from __future__ import annotations

import os
import platform
import time
from typing import Any, Dict

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from clubgap import __version__
from clubgap.api.routers.bag import router as bag_router
from clubgap.config import get_settings
from clubgap.metrics import BUILD_VERSION, MetricsMiddleware, metrics_app

app = FastAPI(title="clubgap", version=__version__)

allow = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost,http://127.0.0.1").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in allow if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)


@app.get("/health")
async def health() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "version": BUILD_VERSION,
        "ts": time.time(),
        "defaults": {
            "display_unit": settings.display_unit,
            "gap_categories": sorted(settings.gap_category_ids),
        },
        "runtime": {
            "python": platform.python_version(),
        },
    }


_metrics_router = APIRouter()


@_metrics_router.get("/metrics", include_in_schema=False)
async def _metrics_endpoint(request: Request):
    return await metrics_app(request)


app.include_router(_metrics_router)
app.include_router(bag_router)


__all__ = ["app"]
