"""Career analysis engine: derive, generate, reconcile, score.

Pipeline:
1. Profile derivation (years, level, current role)
2. Track inference on the focus role
3. Deterministic fallbacks (always computed)
4. Gemini career analysis (optional, may be empty or malformed)
5. Field-by-field merge of generative output over fallbacks
6. Career score and current position
"""

import asyncio
import logging
from datetime import date

from config import settings
from models.schemas.career_analysis import (
    CareerAnalysis,
    CareerPath,
    CurrentPosition,
    MarketInsights,
    WeeklyAction,
)
from models.schemas.career_profile import CareerProfile
from services import gemini_client, prompt_builder
from services.career import fallbacks, merge, salary_table
from services.career.profile_deriver import (
    derive_current_role,
    derive_level,
    derive_years_experience,
    recent_highlights,
)
from services.career.scoring import calculate_career_score
from services.career.templates import DEFAULT_LOCALE, TEMPLATES, get_templates
from services.career.track_classifier import infer_track
from services.gemini_client import CompleteFn
from services.usage import UsageSink, emit_usage

logger = logging.getLogger(__name__)

MAX_ACTION_PLAN_WEEKS = 12


def _resolve_locale(locale: str | None) -> str:
    return locale if locale in TEMPLATES else DEFAULT_LOCALE


async def _request_document(
    complete: CompleteFn | None,
    system_prompt: str,
    user_prompt: str,
    *,
    max_tokens: int,
    temperature: float,
    operation: str,
    user_id: str | None,
    sink: UsageSink | None,
) -> dict:
    """Call the adapter and return its parsed document, or {} when unusable.

    Transport errors from the adapter propagate. Timeouts and cancellation
    of the adapter call degrade to {} so the caller falls back; cancellation
    of the calling task itself is re-raised.
    """
    complete = complete or gemini_client.complete
    try:
        completion = await asyncio.wait_for(
            complete(
                system_prompt,
                user_prompt,
                max_tokens=max_tokens,
                temperature=temperature,
                json_mode=True,
            ),
            timeout=settings.generation_timeout_s,
        )
    except asyncio.TimeoutError:
        logger.warning("%s: generation timed out after %.0fs", operation, settings.generation_timeout_s)
        return {}
    except asyncio.CancelledError:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            raise
        logger.warning("%s: generation cancelled, using fallback", operation)
        return {}

    if completion is None:
        logger.info("%s: generative adapter unavailable, using fallback", operation)
        return {}

    emit_usage(sink, completion, operation=operation, user_id=user_id)
    return gemini_client.parse_json_document(completion.content_json_text)


async def analyze_career(
    profile: CareerProfile | dict,
    locale: str = "en",
    target_industry: str | None = None,
    user_id: str | None = None,
    *,
    complete: CompleteFn | None = None,
    sink: UsageSink | None = None,
    now: date | None = None,
) -> CareerAnalysis:
    """Run the full career analysis for one profile."""
    if isinstance(profile, dict):
        profile = CareerProfile.model_validate(profile)
    locale = _resolve_locale(locale)
    templates = get_templates(locale)

    # --- Layer 1: Profile derivation ---
    years = derive_years_experience(profile.experience, now=now)
    level = derive_level(years)
    current_role = derive_current_role(profile, locale)
    focus_role = (profile.target_role or "").strip() or current_role or templates["generic_role"]

    # --- Layer 2: Track inference ---
    track = infer_track(focus_role)

    # --- Layer 3: Fallbacks (eager) ---
    fallback_paths = fallbacks.fallback_paths(focus_role, locale, track)
    fallback_gaps = fallbacks.fallback_skill_gaps(profile.skills, locale, track)
    fallback_strengths = fallbacks.fallback_strengths(profile.skills, locale)
    fallback_actions = fallbacks.fallback_weekly_actions(locale, fallback_gaps[0].skill)
    fallback_insights = fallbacks.fallback_industry_insights(locale, track, target_industry)

    # --- Layer 4: Gemini career analysis ---
    user_prompt = prompt_builder.build_career_prompt(
        profile,
        current_role=current_role,
        years_experience=years,
        highlights=recent_highlights(profile.experience),
        target_industry=target_industry,
    )
    document = await _request_document(
        complete,
        prompt_builder.build_career_system_prompt(locale),
        user_prompt,
        max_tokens=settings.career_max_tokens,
        temperature=settings.career_temperature,
        operation="career_analyze",
        user_id=user_id,
        sink=sink,
    )
    if not document:
        logger.info("Career analysis for track=%s built entirely from fallbacks", track)

    # --- Layer 5: Reconciliation ---
    career_paths = merge.merge_career_paths(document, fallback_paths, focus_role)
    skill_gaps = merge.merge_skill_gaps(document, fallback_gaps, templates["gap_time"])
    strengths = merge.merge_strengths(document, fallback_strengths)
    weekly_actions = merge.merge_weekly_actions(document.get("weekly_actions"), fallback_actions)
    industry_insights = merge.merge_industry_insights(document, fallback_insights)

    # --- Layer 6: Score + current position ---
    career_score = calculate_career_score(profile, skill_gaps, now=now)
    estimated_salary = salary_table.lookup(current_role, level)

    return CareerAnalysis(
        current_position=CurrentPosition(
            title=current_role,
            level=level,
            years_experience=years,
            estimated_salary=estimated_salary,
            market_demand="high",
        ),
        career_paths=career_paths,
        skill_gaps=skill_gaps,
        strengths=strengths,
        weekly_actions=weekly_actions,
        career_score=career_score,
        industry_insights=industry_insights,
    )


async def generate_action_plan(
    profile: CareerProfile | dict,
    target_path: CareerPath,
    locale: str = "en",
    weeks: int = 4,
    user_id: str | None = None,
    *,
    complete: CompleteFn | None = None,
    sink: UsageSink | None = None,
) -> list[WeeklyAction]:
    """Multi-week action plan towards one career path (three actions per week)."""
    if isinstance(profile, dict):
        profile = CareerProfile.model_validate(profile)
    locale = _resolve_locale(locale)
    weeks = max(1, min(weeks, MAX_ACTION_PLAN_WEEKS))

    current_role = derive_current_role(profile, locale)
    fallback_plan = fallbacks.fallback_action_plan(
        locale, target_path.requirements, weeks, track=target_path.track
    )

    document = await _request_document(
        complete,
        prompt_builder.build_action_plan_system_prompt(locale),
        prompt_builder.build_action_plan_prompt(current_role, profile.skills, target_path, weeks),
        max_tokens=settings.action_plan_max_tokens,
        temperature=settings.action_plan_temperature,
        operation="career_action_plan",
        user_id=user_id,
        sink=sink,
    )

    actions = merge.merge_weekly_actions(document.get("actions"), fallback_plan)
    return actions[: weeks * 3]


async def get_industry_insights(
    industry: str,
    locale: str = "en",
    user_id: str | None = None,
    *,
    complete: CompleteFn | None = None,
    sink: UsageSink | None = None,
) -> MarketInsights:
    locale = _resolve_locale(locale)
    industry = industry.strip()

    document = await _request_document(
        complete,
        prompt_builder.build_insights_system_prompt(locale),
        prompt_builder.build_insights_prompt(industry),
        max_tokens=settings.insights_max_tokens,
        temperature=settings.insights_temperature,
        operation="career_insights",
        user_id=user_id,
        sink=sink,
    )
    return merge.merge_market_insights(document, fallbacks.fallback_market_insights(industry, locale))
