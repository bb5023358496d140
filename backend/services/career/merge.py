"""Reconcile the untyped generative document with deterministic fallbacks.

This module is the only place that reads raw generative output. Every field
passes through one of the coalesce helpers below and comes out as a typed
model, so malformed, missing or out-of-range values can never reach the
caller. Salary figures are always recomputed from the salary table.
"""

import math
from typing import Any, get_args

from models.schemas.career_analysis import (
    ActionCategory,
    ActionPriority,
    CareerMilestone,
    CareerPath,
    GapPriority,
    IndustryInsights,
    LearningResource,
    MarketInsights,
    RequiredSkillLevel,
    ResourceType,
    SkillGap,
    SkillLevel,
    Track,
    WeeklyAction,
)
from services.career import salary_table

DEFAULT_YEARS_FROM_NOW = 1

TRACKS = get_args(Track)
SKILL_LEVELS = get_args(SkillLevel)
REQUIRED_LEVELS = get_args(RequiredSkillLevel)
GAP_PRIORITIES = get_args(GapPriority)
RESOURCE_TYPES = get_args(ResourceType)
ACTION_CATEGORIES = get_args(ActionCategory)
ACTION_PRIORITIES = get_args(ActionPriority)


# ---------------------------------------------------------------------------
# Coalesce helpers
# ---------------------------------------------------------------------------

def as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def str_list(value: Any) -> list[str]:
    """Keep only non-blank strings from a list-like value."""
    return [v.strip() for v in as_list(value) if isinstance(v, str) and v.strip()]


def to_number(value: Any) -> float | None:
    """Finite number from an int, float or numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def first_text(value: Any, fallback: str) -> str:
    """value stripped when it is a non-blank string, else fallback."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def first_list(value: Any, fallback: list) -> list:
    """value when it is a non-empty list, else fallback."""
    if isinstance(value, list) and value:
        return value
    return fallback


def first_finite(value: Any, fallback: float) -> float:
    number = to_number(value)
    return fallback if number is None else number


def pick_choice(value: Any, allowed: tuple, fallback: str) -> str:
    if isinstance(value, str) and value.strip().lower() in allowed:
        return value.strip().lower()
    return fallback


# ---------------------------------------------------------------------------
# Career paths
# ---------------------------------------------------------------------------

def _merge_milestone(
    raw: dict, fallback: CareerMilestone, index: int, focus_role: str
) -> CareerMilestone:
    title = first_text(raw.get("title"), fallback.title)
    years = to_number(raw.get("years_from_now"))
    if years is None or years < 0:
        years = fallback.years_from_now or DEFAULT_YEARS_FROM_NOW
    return CareerMilestone(
        title=title,
        years_from_now=int(round(years)),
        salary_range=salary_table.lookup(
            title or focus_role, salary_table.level_for_index(index)
        ),
        key_skills=first_list(str_list(raw.get("key_skills")), list(fallback.key_skills)),
        description=first_text(raw.get("description"), fallback.description),
    )


def _merge_path(raw: dict, fallback: CareerPath, focus_role: str) -> CareerPath:
    raw_timeline = [as_dict(m) for m in as_list(raw.get("timeline"))]
    fb_timeline = fallback.timeline

    if not raw_timeline:
        # Fallback milestones still go through salary recomputation
        raw_timeline = [{} for _ in fb_timeline]

    timeline = [
        _merge_milestone(
            item,
            fb_timeline[i] if i < len(fb_timeline) else fb_timeline[0],
            i,
            focus_role,
        )
        for i, item in enumerate(raw_timeline)
    ]

    probability = first_finite(raw.get("probability"), fallback.probability)
    return CareerPath(
        id=first_text(raw.get("id"), fallback.id),
        name=first_text(raw.get("name"), fallback.name),
        description=first_text(raw.get("description"), fallback.description),
        track=pick_choice(raw.get("track"), TRACKS, fallback.track),
        timeline=timeline,
        salary_progression=[salary_table.midpoint(m.salary_range) for m in timeline],
        probability=int(round(max(0, min(100, probability)))),
        requirements=first_list(str_list(raw.get("requirements")), list(fallback.requirements)),
    )


def merge_career_paths(
    document: dict, fallback_paths: list[CareerPath], focus_role: str
) -> list[CareerPath]:
    """Generative paths when present, backfilled from the fallback at the same index."""
    raw_paths = as_list(document.get("career_paths"))
    if not raw_paths:
        raw_paths = [{} for _ in fallback_paths]

    merged = []
    for i, raw in enumerate(raw_paths):
        fallback = fallback_paths[i] if i < len(fallback_paths) else fallback_paths[0]
        merged.append(_merge_path(as_dict(raw), fallback, focus_role))
    return merged


# ---------------------------------------------------------------------------
# Skill gaps
# ---------------------------------------------------------------------------

def _merge_resource(raw: Any) -> LearningResource | None:
    item = as_dict(raw)
    name = first_text(item.get("name"), "")
    if not name:
        return None
    url = item.get("url")
    return LearningResource(
        name=name,
        type=pick_choice(item.get("type"), RESOURCE_TYPES, "course"),
        url=url if isinstance(url, str) and url.strip() else None,
    )


def merge_skill_gaps(
    document: dict, fallback_gaps: list[SkillGap], default_time: str = ""
) -> list[SkillGap]:
    gaps = []
    for raw in as_list(document.get("skill_gaps")):
        item = as_dict(raw)
        skill = first_text(item.get("skill"), "")
        if not skill:
            continue
        resources = [r for r in map(_merge_resource, as_list(item.get("resources"))) if r]
        gaps.append(
            SkillGap(
                skill=skill,
                current_level=pick_choice(item.get("current_level"), SKILL_LEVELS, "beginner"),
                required_level=pick_choice(item.get("required_level"), REQUIRED_LEVELS, "advanced"),
                priority=pick_choice(item.get("priority"), GAP_PRIORITIES, "medium"),
                resources=resources,
                estimated_time_to_acquire=first_text(
                    item.get("estimated_time_to_acquire"), default_time
                ),
            )
        )
    return gaps or list(fallback_gaps)


# ---------------------------------------------------------------------------
# Strengths, weekly actions, insights
# ---------------------------------------------------------------------------

def merge_strengths(document: dict, fallback: list[str]) -> list[str]:
    return first_list(str_list(document.get("strengths")), list(fallback))


def merge_weekly_actions(
    raw_actions: Any,
    fallback_actions: list[WeeklyAction],
    id_prefix: str = "action-",
) -> list[WeeklyAction]:
    """Normalize generative actions; ids are made unique and completed is reset."""
    items = [as_dict(a) for a in as_list(raw_actions)]
    if not items or not fallback_actions:
        return [a.model_copy(update={"completed": False}) for a in fallback_actions]

    seen: set[str] = set()
    actions = []
    for n, item in enumerate(items):
        fallback = fallback_actions[n] if n < len(fallback_actions) else fallback_actions[0]

        raw_id = item.get("id")
        action_id = ""
        if isinstance(raw_id, (str, int)) and not isinstance(raw_id, bool):
            action_id = str(raw_id).strip()
        if not action_id or action_id in seen:
            k = n + 1
            while f"{id_prefix}{k}" in seen:
                k += 1
            action_id = f"{id_prefix}{k}"
        seen.add(action_id)

        hours = to_number(item.get("estimated_hours"))
        week = to_number(item.get("week"))
        due_date = item.get("due_date")
        actions.append(
            WeeklyAction(
                id=action_id,
                title=first_text(item.get("title"), fallback.title),
                description=first_text(item.get("description"), fallback.description),
                category=pick_choice(item.get("category"), ACTION_CATEGORIES, fallback.category),
                priority=pick_choice(item.get("priority"), ACTION_PRIORITIES, fallback.priority),
                estimated_hours=hours if hours is not None and hours >= 0 else fallback.estimated_hours,
                completed=False,
                due_date=due_date if isinstance(due_date, str) and due_date.strip() else None,
                week=int(week) if week is not None and week >= 1 else fallback.week,
            )
        )
    return actions


def merge_industry_insights(document: dict, fallback: IndustryInsights) -> IndustryInsights:
    raw = as_dict(document.get("industry_insights"))
    return IndustryInsights(
        trending_skills=first_list(str_list(raw.get("trending_skills")), list(fallback.trending_skills)),
        hot_industries=first_list(str_list(raw.get("hot_industries")), list(fallback.hot_industries)),
        saudization_opportunities=first_list(
            str_list(raw.get("saudization_opportunities")),
            list(fallback.saudization_opportunities),
        ),
        salary_trends=first_text(raw.get("salary_trends"), fallback.salary_trends),
    )


def merge_market_insights(document: dict, fallback: MarketInsights) -> MarketInsights:
    return MarketInsights(
        trending_roles=first_list(str_list(document.get("trending_roles")), list(fallback.trending_roles)),
        salary_trends=first_text(document.get("salary_trends"), fallback.salary_trends),
        top_companies=first_list(str_list(document.get("top_companies")), list(fallback.top_companies)),
        in_demand_skills=first_list(
            str_list(document.get("in_demand_skills")), list(fallback.in_demand_skills)
        ),
        saudization_info=first_text(document.get("saudization_info"), fallback.saudization_info),
    )
