from models.schemas.career_analysis import SalaryRange
from services.career.salary_table import SALARY_TABLE, level_for_index, lookup, midpoint


def test_exact_role_and_level():
    salary = lookup("Software Engineer", "senior")
    assert salary.min == 25000
    assert salary.max == 40000
    assert salary.currency == "SAR"


def test_unknown_role_uses_default_row():
    salary = lookup("Unknown Role Xyz", "mid")
    assert (salary.min, salary.max) == (16000, 25000)


def test_unknown_level_uses_mid():
    salary = lookup("Data Scientist", "wizard")
    assert (salary.min, salary.max) == (22000, 35000)


def test_role_match_is_exact():
    # Case and seniority prefixes are not normalized
    assert lookup("software engineer", "lead") == lookup("default", "lead")
    assert lookup("Senior Software Engineer", "lead").max == 52000


def test_every_band_is_ordered():
    for role, levels in SALARY_TABLE.items():
        for level, band in levels.items():
            assert 0 <= band["min"] <= band["max"], (role, level)


def test_level_for_index_clamps():
    assert level_for_index(0) == "mid"
    assert level_for_index(1) == "senior"
    assert level_for_index(4) == "executive"
    assert level_for_index(9) == "executive"
    assert level_for_index(-1) == "mid"


def test_midpoint():
    assert midpoint(SalaryRange(min=16000, max=25000)) == 20500
