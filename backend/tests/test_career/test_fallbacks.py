"""Tests for the deterministic fallback generator."""

from services.career.fallbacks import (
    fallback_action_plan,
    fallback_industry_insights,
    fallback_market_insights,
    fallback_paths,
    fallback_skill_gaps,
    fallback_strengths,
    fallback_weekly_actions,
)
from services.career.track_classifier import TRACK_SKILLS


class TestFallbackPaths:
    def test_technical_role(self):
        paths = fallback_paths("Software Engineer", "en", "technical")
        assert [p.track for p in paths] == ["technical", "management"]
        assert paths[0].timeline[0].title == "Senior Software Engineer"
        for path in paths:
            assert len(path.timeline) >= 1
            assert len(path.salary_progression) == len(path.timeline)
            for milestone in path.timeline:
                assert milestone.salary_range.min <= milestone.salary_range.max

    def test_management_role_gets_specialist_alternative(self):
        paths = fallback_paths("Engineering Manager", "en", "management")
        assert [p.track for p in paths] == ["management", "specialist"]

    def test_seniority_prefix_not_doubled(self):
        paths = fallback_paths("Senior Data Analyst", "en", "technical")
        assert paths[0].timeline[0].title == "Senior Data Analyst"
        assert paths[0].timeline[1].title == "Lead Data Analyst"

    def test_arabic_copy(self):
        paths = fallback_paths("مختص", "ar", "specialist")
        assert paths[1].name == "مسار القيادة"
        assert paths[0].timeline[0].title == "مختص أول"

    def test_unknown_locale_uses_english(self):
        paths = fallback_paths("Professional", "fr", "specialist")
        assert paths[1].name == "Leadership Track"

    def test_deterministic(self):
        first = fallback_paths("Product Manager", "en", "management")
        second = fallback_paths("Product Manager", "en", "management")
        assert [p.model_dump() for p in first] == [p.model_dump() for p in second]


class TestFallbackSkillGaps:
    def test_excludes_owned_skills_case_insensitively(self):
        gaps = fallback_skill_gaps([" system design ", "ci/cd"], "en", "technical")
        assert [g.skill for g in gaps] == [
            "Cloud Architecture",
            "Automated Testing",
            "Technical Mentoring",
        ]
        assert [g.priority for g in gaps] == ["high", "medium", "medium"]

    def test_capped_at_three(self):
        gaps = fallback_skill_gaps([], "en", "management")
        assert len(gaps) == 3
        assert gaps[0].resources

    def test_all_canonical_skills_owned(self):
        gaps = fallback_skill_gaps(list(TRACK_SKILLS["entrepreneurial"]), "en", "entrepreneurial")
        assert len(gaps) == 1
        assert gaps[0].skill == TRACK_SKILLS["entrepreneurial"][0]
        assert gaps[0].required_level == "expert"
        assert gaps[0].priority == "high"

    def test_arabic_time_estimate(self):
        gaps = fallback_skill_gaps([], "ar", "specialist")
        assert gaps[0].estimated_time_to_acquire == "3-6 أشهر"


class TestFallbackStrengths:
    def test_first_three_skills(self):
        assert fallback_strengths(["Python", "SQL", "Docker", "AWS"], "en") == ["Python", "SQL", "Docker"]

    def test_fixed_triad_when_few_skills(self):
        assert fallback_strengths(["Python", ""], "en") == ["Adaptability", "Problem solving", "Communication"]
        assert len(fallback_strengths([], "ar")) == 3


class TestFallbackActions:
    def test_three_actions(self):
        actions = fallback_weekly_actions("en", "System Design")
        assert [a.id for a in actions] == ["action-1", "action-2", "action-3"]
        assert [a.priority for a in actions] == ["high", "medium", "medium"]
        assert [a.estimated_hours for a in actions] == [2, 1, 1]
        assert all(a.completed is False for a in actions)
        assert "System Design" in actions[1].title

    def test_action_plan_rotates_focus(self):
        plan = fallback_action_plan("en", ["Budgeting", "Fundraising"], weeks=3)
        assert len(plan) == 9
        assert plan[0].id == "week1-1"
        assert plan[-1].week == 3
        assert "Budgeting" in plan[1].title
        assert "Fundraising" in plan[4].title
        assert "Budgeting" in plan[7].title

    def test_action_plan_without_requirements(self):
        plan = fallback_action_plan("ar", [], weeks=1, track="technical")
        assert len(plan) == 3
        assert TRACK_SKILLS["technical"][0] in plan[1].title


class TestFallbackInsights:
    def test_target_industry_first(self):
        insights = fallback_industry_insights("en", "technical", target_industry="Healthcare")
        assert insights.hot_industries[0] == "Healthcare"
        assert insights.hot_industries.count("Healthcare") == 1
        assert insights.trending_skills == TRACK_SKILLS["technical"][:3]
        assert insights.salary_trends

    def test_market_insights_mention_industry(self):
        insights = fallback_market_insights("Energy", "en")
        assert "Energy" in insights.salary_trends
        assert insights.top_companies
