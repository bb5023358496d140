import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_complete_fn, get_usage_sink
from config import settings
from models.requests import ActionPlanRequest, CareerAnalyzeRequest, IndustryInsightsRequest
from models.responses import (
    ActionPlanResponse,
    CareerAnalysisResponse,
    HealthResponse,
    IndustryInsightsResponse,
)
from services.career import engine
from services.gemini_client import CompleteFn, GenerativeAdapterError
from services.usage import UsageSink

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _adapter_failure(error: GenerativeAdapterError) -> HTTPException:
    # Auth / key problems mean the service is not configured correctly
    if error.status_code in (401, 403):
        return HTTPException(status_code=503, detail="AI provider not configured")
    return HTTPException(status_code=502, detail="AI provider request failed")


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=bool(settings.gemini_api_key))


@router.post("/career/analyze", response_model=CareerAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    body: CareerAnalyzeRequest,
    complete: CompleteFn = Depends(get_complete_fn),
    sink: UsageSink = Depends(get_usage_sink),
):
    try:
        result = await engine.analyze_career(
            body.resume,
            locale=body.options.locale,
            target_industry=body.options.target_industry,
            user_id=body.options.user_id,
            complete=complete,
            sink=sink,
        )
    except GenerativeAdapterError as e:
        logger.error("Career analysis failed: %s", e)
        raise _adapter_failure(e)
    return CareerAnalysisResponse(result=result)


@router.post("/career/action-plan", response_model=ActionPlanResponse)
@limiter.limit(settings.rate_limit)
async def action_plan(
    request: Request,
    body: ActionPlanRequest,
    complete: CompleteFn = Depends(get_complete_fn),
    sink: UsageSink = Depends(get_usage_sink),
):
    try:
        result = await engine.generate_action_plan(
            body.resume,
            body.target_path,
            locale=body.options.locale,
            weeks=body.weeks,
            user_id=body.options.user_id,
            complete=complete,
            sink=sink,
        )
    except GenerativeAdapterError as e:
        logger.error("Action plan generation failed: %s", e)
        raise _adapter_failure(e)
    return ActionPlanResponse(result=result)


@router.post("/career/industry-insights", response_model=IndustryInsightsResponse)
@limiter.limit(settings.rate_limit)
async def industry_insights(
    request: Request,
    body: IndustryInsightsRequest,
    complete: CompleteFn = Depends(get_complete_fn),
    sink: UsageSink = Depends(get_usage_sink),
):
    if not body.industry.strip():
        raise HTTPException(status_code=400, detail="Industry required")
    try:
        result = await engine.get_industry_insights(
            body.industry,
            locale=body.options.locale,
            user_id=body.options.user_id,
            complete=complete,
            sink=sink,
        )
    except GenerativeAdapterError as e:
        logger.error("Industry insights failed: %s", e)
        raise _adapter_failure(e)
    return IndustryInsightsResponse(result=result)
