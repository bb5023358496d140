"""Career readiness score: additive heuristic over resume completeness."""

from datetime import date

from models.schemas.career_analysis import SkillGap
from models.schemas.career_profile import CareerProfile
from services.career.profile_deriver import derive_years_experience

MAX_EXPERIENCE_POINTS = 25
MAX_SKILL_POINTS = 25
EDUCATION_POINTS = 10
ADVANCED_DEGREE_POINTS = 5
MAX_CERTIFICATION_POINTS = 10
MAX_GAP_PENALTY = 15
SUMMARY_POINTS = 8
LINKEDIN_POINTS = 5
EXPERIENCE_ENTRIES_POINTS = 7
PROJECT_POINTS = 5

_ADVANCED_DEGREE_MARKERS = ("master", "mba")


def calculate_career_score(
    profile: CareerProfile,
    skill_gaps: list[SkillGap],
    now: date | None = None,
) -> int:
    """Returns 0-100."""
    years = derive_years_experience(profile.experience, now=now)
    score = 0.0

    score += min(MAX_EXPERIENCE_POINTS, years * 3)
    score += min(MAX_SKILL_POINTS, len(profile.skills) * 2)

    if profile.education:
        score += EDUCATION_POINTS
        if any(
            marker in (e.degree or "").lower()
            for e in profile.education
            for marker in _ADVANCED_DEGREE_MARKERS
        ):
            score += ADVANCED_DEGREE_POINTS

    score += min(MAX_CERTIFICATION_POINTS, len(profile.certifications) * 3)

    critical_gaps = sum(1 for g in skill_gaps if g.priority == "critical")
    score -= min(MAX_GAP_PENALTY, critical_gaps * 5)

    # Profile completeness
    if profile.summary and len(profile.summary) > 100:
        score += SUMMARY_POINTS
    if profile.contact.linkedin:
        score += LINKEDIN_POINTS
    if len(profile.experience) >= 3:
        score += EXPERIENCE_ENTRIES_POINTS
    if profile.projects:
        score += PROJECT_POINTS

    return int(max(0, min(100, round(score))))
