from datetime import date

import pytest

from models.schemas.career_analysis import SkillGap
from models.schemas.career_profile import CareerProfile
from services.career.scoring import calculate_career_score

NOW = date(2024, 1, 1)


def _gaps(n: int, priority: str = "critical") -> list[SkillGap]:
    return [SkillGap(skill=f"skill-{i}", priority=priority) for i in range(n)]


FULL_PROFILE = CareerProfile(
    summary="x" * 150,
    skills=[f"skill-{i}" for i in range(50)],
    education=[{"degree": "Master of Science", "field": "CS"}],
    certifications=[{"name": f"cert-{i}"} for i in range(5)],
    projects=[{"name": "Side project"}],
    contact={"linkedin": "linkedin.com/in/someone"},
    experience=[
        {"position": "Engineer", "start_date": "2000-01", "end_date": "2010-01"},
        {"position": "Senior Engineer", "start_date": "2010-01", "end_date": "2015-01"},
        {"position": "Lead Engineer", "start_date": "2015-01", "current": True},
    ],
)


def test_empty_profile_scores_zero():
    assert calculate_career_score(CareerProfile(), [], now=NOW) == 0


def test_full_profile_caps_at_100():
    assert calculate_career_score(FULL_PROFILE, [], now=NOW) == 100


def test_critical_gap_penalty_is_capped():
    assert calculate_career_score(FULL_PROFILE, _gaps(10), now=NOW) == 85
    assert calculate_career_score(FULL_PROFILE, _gaps(2), now=NOW) == 90


def test_non_critical_gaps_do_not_penalize():
    assert calculate_career_score(FULL_PROFILE, _gaps(5, "high"), now=NOW) == 100


def test_never_negative():
    assert calculate_career_score(CareerProfile(), _gaps(10), now=NOW) == 0


@pytest.mark.parametrize(
    "degree, expected",
    [("Bachelor of Arts", 10), ("MBA", 15), ("master's degree", 15), ("", 10)],
)
def test_education_points(degree, expected):
    profile = CareerProfile(education=[{"degree": degree, "field": ""}])
    assert calculate_career_score(profile, [], now=NOW) == expected


def test_individual_terms():
    profile = CareerProfile(
        skills=["a", "b", "c"],  # 6
        certifications=[{"name": "PMP"}],  # 3
        summary="short",  # too short for points
        contact={"linkedin": "in/x"},  # 5
        experience=[{"position": "Analyst", "start_date": "2022-01", "end_date": "2023-01"}],  # 3
    )
    assert calculate_career_score(profile, [], now=NOW) == 17
