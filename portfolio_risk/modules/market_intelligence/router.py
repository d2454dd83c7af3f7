"""Market Intelligence API router."""

from datetime import datetime, timezone

from fastapi import APIRouter

from portfolio_risk.modules.market_intelligence import service
from portfolio_risk.modules.market_intelligence.schemas import MarketIntelligenceSnapshot

router = APIRouter(prefix="/market-intelligence", tags=["market-intelligence"])


@router.get("", response_model=MarketIntelligenceSnapshot)
async def get_market_intelligence():
    """Indicators, movers, FX, alerts and regional capital-markets summaries."""
    return service.build_snapshot(datetime.now(timezone.utc))
