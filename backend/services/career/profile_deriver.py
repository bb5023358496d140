"""Experience years, seniority level and current role from a career profile."""

import logging
import math
import re
from datetime import date, datetime

from models.schemas.career_profile import CareerProfile, ProfileExperience
from services.career.templates import get_templates

logger = logging.getLogger(__name__)

# (upper bound in years, level); bounds are exclusive
LEVEL_THRESHOLDS: list[tuple[float, str]] = [
    (1, "entry"),
    (2, "junior"),
    (5, "mid"),
    (8, "senior"),
    (12, "lead"),
    (18, "director"),
]
TOP_LEVEL = "executive"

_DATE_FORMATS = ["%Y-%m", "%Y/%m", "%m/%Y", "%m-%Y", "%b %Y", "%B %Y", "%Y"]
_YEAR_RE = re.compile(r"^\d{4}$")


def parse_date(value: str | None) -> date | None:
    """Parse the date formats resumes commonly use. Returns None when unparseable."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    try:
        # Handles YYYY-MM-DD and full ISO timestamps (incl. trailing Z)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        if fmt == "%Y" and not _YEAR_RE.match(text):
            continue
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _month_delta(start: date, end: date) -> int:
    return max(0, (end.year - start.year) * 12 + (end.month - start.month))


def derive_years_experience(
    experience: list[ProfileExperience], now: date | None = None
) -> float:
    """Sum calendar-month spans across all entries, rounded to 1 decimal.

    Entries without a parseable start date are skipped. The end is today
    when the entry is current or its end date is missing/unparseable.
    """
    today = now or date.today()
    total_months = 0
    for entry in experience:
        start = parse_date(entry.start_date)
        if start is None:
            continue
        end = None if entry.current else parse_date(entry.end_date)
        total_months += _month_delta(start, end or today)

    # Half-up rounding to one decimal
    return math.floor(total_months / 12 * 10 + 0.5) / 10


def derive_level(years: float) -> str:
    for bound, level in LEVEL_THRESHOLDS:
        if years < bound:
            return level
    return TOP_LEVEL


def _recency_key(entry: ProfileExperience) -> tuple[int, int, int]:
    start = parse_date(entry.start_date)
    return (
        0 if entry.current else 1,
        0 if start else 1,
        -start.toordinal() if start else 0,
    )


def recent_highlights(
    experience: list[ProfileExperience], limit: int = 3
) -> list[ProfileExperience]:
    """Most recent entries first: current ones, then by start date descending.

    Entries with unparseable start dates sort last; ties keep input order.
    """
    return sorted(experience, key=_recency_key)[:limit]


def derive_current_role(profile: CareerProfile, locale: str = "en") -> str:
    """Pick the title that best describes what the person does today."""
    for entry in profile.experience:
        if entry.current and entry.position.strip():
            return entry.position.strip()

    dated = [
        (parse_date(e.start_date), e)
        for e in profile.experience
        if e.position.strip()
    ]
    dated = [(d, e) for d, e in dated if d is not None]
    if dated:
        latest = max(dated, key=lambda pair: pair[0])
        return latest[1].position.strip()

    for entry in profile.experience:
        if entry.position.strip():
            return entry.position.strip()

    if profile.target_role and profile.target_role.strip():
        return profile.target_role.strip()

    logger.debug("No role found in profile, using generic label")
    return get_templates(locale)["generic_role"]
