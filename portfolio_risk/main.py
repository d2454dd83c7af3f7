from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_risk.core.config import settings
from portfolio_risk.core.errors import global_exception_handler, http_exception_handler
from portfolio_risk.core.sentry import init_sentry
from portfolio_risk.modules.deal_screening.router import router as deal_screening_router
from portfolio_risk.modules.deal_structuring.router import router as deal_structuring_router
from portfolio_risk.modules.fund_operations.router import router as fund_operations_router
from portfolio_risk.modules.market_intelligence.router import router as market_intelligence_router
from portfolio_risk.modules.risk_assessment.router import router as risk_assessment_router
from portfolio_risk.modules.workspace_integration.router import router as workspace_integration_router

# ── Sentry: initialised before the FastAPI app is created ─────────────────────
init_sentry(settings.SENTRY_DSN, settings.SENTRY_ENVIRONMENT, settings.APP_VERSION)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    logger.info("Starting portfolio risk engine", env=settings.APP_ENV)
    yield
    logger.info("Shutting down portfolio risk engine")


_is_prod = settings.APP_ENV == "production"

app = FastAPI(
    title="Portfolio Risk Engine",
    description="Rule-based risk assessment, deal screening and fund analytics for private markets.",
    version="0.1.0",
    docs_url=None if _is_prod else "/docs",
    redoc_url=None if _is_prod else "/redoc",
    openapi_url=None if _is_prod else "/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept", "X-Request-ID"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, global_exception_handler)


# ── X-API-Version response header ────────────────────────────────────────────


@app.middleware("http")
async def add_version_header(request: Request, call_next) -> Response:
    response = await call_next(request)
    response.headers["X-API-Version"] = "v1"
    return response


# ── Health check (root-level, not under /v1) ─────────────────────────────────


@app.get("/health")
async def health_check() -> dict:
    return {"status": "healthy", "service": "portfolio-risk-engine"}


# ── /v1 versioned router ──────────────────────────────────────────────────────

api_v1 = APIRouter(prefix="/v1")

api_v1.include_router(risk_assessment_router)
api_v1.include_router(deal_screening_router)
api_v1.include_router(fund_operations_router)
api_v1.include_router(deal_structuring_router)
api_v1.include_router(market_intelligence_router)
api_v1.include_router(workspace_integration_router)

app.include_router(api_v1)
