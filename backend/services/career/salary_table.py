"""GCC salary bands (SAR, monthly) by role and seniority level."""

from models.schemas.career_analysis import SalaryRange

DEFAULT_ROLE = "default"
DEFAULT_LEVEL = "mid"

# Milestone position -> level used for salary projection.
# Progression always starts at "mid", whatever the current level is.
MILESTONE_LEVELS: list[str] = ["mid", "senior", "lead", "director", "executive"]

SALARY_TABLE: dict[str, dict[str, dict[str, int]]] = {
    "Software Engineer": {
        "entry": {"min": 8000, "max": 12000},
        "junior": {"min": 12000, "max": 16000},
        "mid": {"min": 16000, "max": 25000},
        "senior": {"min": 25000, "max": 40000},
        "lead": {"min": 35000, "max": 55000},
        "director": {"min": 50000, "max": 80000},
        "executive": {"min": 70000, "max": 120000},
    },
    "Product Manager": {
        "entry": {"min": 10000, "max": 14000},
        "junior": {"min": 14000, "max": 20000},
        "mid": {"min": 20000, "max": 30000},
        "senior": {"min": 30000, "max": 45000},
        "lead": {"min": 40000, "max": 60000},
        "director": {"min": 55000, "max": 85000},
        "executive": {"min": 80000, "max": 130000},
    },
    "Data Scientist": {
        "entry": {"min": 10000, "max": 15000},
        "junior": {"min": 15000, "max": 22000},
        "mid": {"min": 22000, "max": 35000},
        "senior": {"min": 35000, "max": 50000},
        "lead": {"min": 45000, "max": 65000},
        "director": {"min": 60000, "max": 90000},
        "executive": {"min": 85000, "max": 140000},
    },
    "Marketing Manager": {
        "entry": {"min": 8000, "max": 12000},
        "junior": {"min": 12000, "max": 18000},
        "mid": {"min": 18000, "max": 28000},
        "senior": {"min": 28000, "max": 42000},
        "lead": {"min": 38000, "max": 55000},
        "director": {"min": 50000, "max": 75000},
        "executive": {"min": 70000, "max": 110000},
    },
    DEFAULT_ROLE: {
        "entry": {"min": 7000, "max": 11000},
        "junior": {"min": 11000, "max": 16000},
        "mid": {"min": 16000, "max": 25000},
        "senior": {"min": 25000, "max": 38000},
        "lead": {"min": 35000, "max": 52000},
        "director": {"min": 48000, "max": 72000},
        "executive": {"min": 65000, "max": 100000},
    },
}


def lookup(role: str, level: str) -> SalaryRange:
    """Return the salary band for an exact role/level, falling back to
    the default role row and then to the mid level. Never raises."""
    row = SALARY_TABLE.get(role) or SALARY_TABLE[DEFAULT_ROLE]
    band = row.get(level) or row[DEFAULT_LEVEL]
    return SalaryRange(min=band["min"], max=band["max"])


def midpoint(salary: SalaryRange) -> float:
    return (salary.min + salary.max) / 2


def level_for_index(index: int) -> str:
    return MILESTONE_LEVELS[max(0, min(index, len(MILESTONE_LEVELS) - 1))]
