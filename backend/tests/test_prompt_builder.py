from models.schemas.career_profile import CareerProfile
from services.career.fallbacks import fallback_paths
from services.prompt_builder import (
    build_action_plan_prompt,
    build_career_prompt,
    build_career_system_prompt,
    build_insights_system_prompt,
)


def test_career_prompt_trims_inputs():
    profile = CareerProfile(
        skills=[f"skill{i}" for i in range(20)],
        summary="s" * 1000,
        education=[{"degree": "BSc", "field": "CS"}, {"degree": "MSc", "field": "AI"}, {"degree": "PhD", "field": "ML"}],
        certifications=[{"name": "AWS SA"}],
        projects=[{"name": "Chat bot"}],
    )
    prompt = build_career_prompt(profile, "Engineer", 3.5, highlights=[])
    assert "skill11" in prompt
    assert "skill12" not in prompt
    assert "s" * 400 in prompt and "s" * 401 not in prompt
    assert "BSc in CS; MSc in AI" in prompt
    assert "PhD" not in prompt
    assert "AWS SA" in prompt and "Chat bot" in prompt
    assert "Experience: 3.5 years" in prompt
    assert "Target Industry" not in prompt


def test_empty_profile_prompt():
    prompt = build_career_prompt(CareerProfile(), "Professional", 0, highlights=[])
    assert "Skills: Not provided" in prompt
    assert '"career_paths"' in prompt


def test_system_prompts_follow_locale():
    assert "Saudi/GCC" in build_career_system_prompt("en")
    assert "السعودي" in build_career_system_prompt("ar")
    assert build_insights_system_prompt("xx") == build_insights_system_prompt("en")


def test_action_plan_prompt():
    path = fallback_paths("Software Engineer", "en", "technical")[0]
    prompt = build_action_plan_prompt("Software Engineer", ["SQL"], path, weeks=3)
    assert "3-week action plan" in prompt
    assert "Generate 9 specific actions" in prompt
    assert path.name in prompt
