"""Deterministic career content built from the profile alone.

Every function here must succeed for any input (including an empty profile)
and never touches the generative adapter. The engine merges generative output
on top of these results field by field.
"""

import re

from models.schemas.career_analysis import (
    CareerMilestone,
    CareerPath,
    IndustryInsights,
    LearningResource,
    MarketInsights,
    SkillGap,
    WeeklyAction,
)
from services.career import salary_table
from services.career.templates import get_templates
from services.career.track_classifier import TRACK_SKILLS

MAX_FALLBACK_GAPS = 3
FALLBACK_ACTION_HOURS = (2, 1, 1)

_SENIORITY_PREFIX_RE = re.compile(
    r"^(?:senior|sr\.?|junior|jr\.?|lead|principal|staff)\s+", re.IGNORECASE
)


def _base_role(role: str) -> str:
    """'Senior Software Engineer' -> 'Software Engineer'."""
    stripped = _SENIORITY_PREFIX_RE.sub("", role.strip())
    return stripped or role.strip()


def _normalize_skill(skill: str) -> str:
    return skill.strip().lower()


def _build_path(path_id: str, template: dict, role: str, track: str) -> CareerPath:
    skills = TRACK_SKILLS[track]
    timeline = []
    for i, (title_tpl, years, description) in enumerate(template["milestones"]):
        title = title_tpl.format(role=role)
        timeline.append(
            CareerMilestone(
                title=title,
                years_from_now=years,
                salary_range=salary_table.lookup(title, salary_table.level_for_index(i)),
                key_skills=skills[i * 2:i * 2 + 2],
                description=description,
            )
        )
    return CareerPath(
        id=path_id,
        name=template["name"].format(role=role),
        description=template["description"],
        track=track,
        timeline=timeline,
        salary_progression=[salary_table.midpoint(m.salary_range) for m in timeline],
        probability=template["probability"],
        requirements=skills[:3],
    )


def fallback_paths(role: str, locale: str, track: str) -> list[CareerPath]:
    """Two paths: one deepening the inferred track, one leadership path.

    The leadership path sits on the management track, or on the specialist
    track when the person is already on the management track.
    """
    templates = get_templates(locale)
    base_role = _base_role(role)
    leadership_track = "specialist" if track == "management" else "management"
    return [
        _build_path("path-1", templates["deepen_path"], base_role, track),
        _build_path("path-2", templates["leadership_path"], base_role, leadership_track),
    ]


def fallback_skill_gaps(skills: list[str], locale: str, track: str) -> list[SkillGap]:
    """Canonical track skills the resume does not list yet (max 3)."""
    templates = get_templates(locale)
    owned = {_normalize_skill(s) for s in skills if isinstance(s, str)}
    canonical = TRACK_SKILLS[track]
    missing = [s for s in canonical if _normalize_skill(s) not in owned]

    gaps = []
    for i, skill in enumerate(missing[:MAX_FALLBACK_GAPS]):
        gaps.append(
            SkillGap(
                skill=skill,
                current_level="none",
                required_level="advanced",
                priority="high" if i == 0 else "medium",
                resources=_resources_for(skill, templates),
                estimated_time_to_acquire=templates["gap_time"],
            )
        )

    if not gaps:
        # Every canonical skill is already listed: push the top one to mastery
        skill = canonical[0]
        gaps.append(
            SkillGap(
                skill=skill,
                current_level="intermediate",
                required_level="expert",
                priority="high",
                resources=_resources_for(skill, templates),
                estimated_time_to_acquire=templates["gap_time"],
            )
        )
    return gaps


def _resources_for(skill: str, templates: dict) -> list[LearningResource]:
    return [
        LearningResource(name=name.format(skill=skill), type=kind)
        for name, kind in templates["gap_resources"]
    ]


def fallback_strengths(skills: list[str], locale: str) -> list[str]:
    named = [s.strip() for s in skills if isinstance(s, str) and s.strip()]
    if len(named) >= 3:
        return named[:3]
    return list(get_templates(locale)["strengths"])


def fallback_weekly_actions(
    locale: str,
    focus_skill: str,
    id_prefix: str = "action-",
    week: int | None = None,
) -> list[WeeklyAction]:
    """The fixed three-action template; first is high priority."""
    templates = get_templates(locale)
    actions = []
    for i, (title, description, category) in enumerate(templates["actions"]):
        actions.append(
            WeeklyAction(
                id=f"{id_prefix}{i + 1}",
                title=title.format(skill=focus_skill),
                description=description.format(skill=focus_skill),
                category=category,
                priority="high" if i == 0 else "medium",
                estimated_hours=FALLBACK_ACTION_HOURS[i],
                completed=False,
                week=week,
            )
        )
    return actions


def fallback_action_plan(
    locale: str, requirements: list[str], weeks: int, track: str = "specialist"
) -> list[WeeklyAction]:
    """Repeat the weekly template, rotating the skill focus through requirements."""
    focus_pool = [r for r in requirements if isinstance(r, str) and r.strip()] or TRACK_SKILLS[track]
    plan = []
    for week in range(1, weeks + 1):
        focus = focus_pool[(week - 1) % len(focus_pool)]
        plan.extend(
            fallback_weekly_actions(locale, focus, id_prefix=f"week{week}-", week=week)
        )
    return plan


def fallback_industry_insights(
    locale: str, track: str, target_industry: str | None = None
) -> IndustryInsights:
    copy = get_templates(locale)["insights"]
    hot_industries = list(copy["hot_industries"])
    if target_industry and target_industry.strip():
        industry = target_industry.strip()
        hot_industries = [industry] + [h for h in hot_industries if h != industry]
    return IndustryInsights(
        trending_skills=TRACK_SKILLS[track][:3],
        hot_industries=hot_industries,
        saudization_opportunities=list(copy["saudization_opportunities"]),
        salary_trends=copy["salary_trends"],
    )


def fallback_market_insights(industry: str, locale: str) -> MarketInsights:
    copy = get_templates(locale)["market"]
    return MarketInsights(
        trending_roles=list(copy["trending_roles"]),
        salary_trends=copy["salary_trends"].format(industry=industry),
        top_companies=list(copy["top_companies"]),
        in_demand_skills=list(copy["in_demand_skills"]),
        saudization_info=copy["saudization_info"].format(industry=industry),
    )
