# This file bootstraps the FastAPI app, wires up middlewares for
# logging/metrics, sets up CORS, and includes all the routers.
# It’s the heart of the project where everything is connected.

import os

from fastapi import APIRouter, FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

import app.models  # noqa: F401  (register tables on Base.metadata)
from app.core.config import settings
from app.core.db import Base, SessionLocal, engine
from app.core.errors import AffiliateServiceError
from app.core.logging import APILoggingMiddleware
from app.core.metrics import MetricsMiddleware
from app.core.request_context import RequestContextMiddleware
from app.core.startup_checks import run_startup_checks
from app.core.time import utcnow
from app.core.versioning import API_V1_PREFIX

from app.api.public import router as public_router
from app.api.admin_affiliates import router as admin_affiliates_router
from app.api.affiliate_portal import router as affiliate_portal_router

# Create DB tables right away so the app doesn’t hit missing
# schema issues later. This runs once on startup.
if os.getenv("SKIP_MIGRATIONS") != "1":
    Base.metadata.create_all(bind=engine)

app = FastAPI(title="Affiliate Hub")


@app.on_event("startup")
def _run_startup_checks() -> None:
    run_startup_checks()
    if settings.SEED_DEMO_DATA:
        from app.seed.utils import seed_default_commission_settings, seed_demo_affiliates

        with SessionLocal() as db:
            seed_default_commission_settings(db)
            seed_demo_affiliates(db)


@app.exception_handler(AffiliateServiceError)
def handle_affiliate_error(_request, exc: AffiliateServiceError):
    response = JSONResponse(status_code=exc.status_code, content=exc.to_payload())
    response.headers["X-Error-Code"] = exc.code
    return response


# Observability layers: request logs and Prometheus metrics.
app.add_middleware(APILoggingMiddleware)
app.add_middleware(MetricsMiddleware)

# Routers are served both under /api/v1 and at the root.
api_v1 = APIRouter(prefix=API_V1_PREFIX)
api_root = APIRouter(prefix="")

routers = [
    public_router,
    admin_affiliates_router,
    affiliate_portal_router,
]

for r in routers:
    api_v1.include_router(r)
    api_root.include_router(r)

app.include_router(api_v1)
app.include_router(api_root)

# Attach request context (request_id) early.
app.add_middleware(RequestContextMiddleware)


# /metrics endpoint (Prometheus scraping)
@app.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


# /ping endpoint and versioned health
@app.get("/ping")
@app.get(f"{API_V1_PREFIX}/health")
def ping():
    return {"status": "ok", "timestamp": utcnow().isoformat()}


# CORS for the admin and affiliate portals.
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-Id", "X-Error-Code"],
    max_age=86400,
)
