"""All prompt templates for Gemini API calls."""

from models.schemas.career_analysis import CareerPath
from models.schemas.career_profile import CareerProfile, ProfileExperience

MAX_PROMPT_SKILLS = 12
MAX_PROMPT_EDUCATION = 2
MAX_SUMMARY_CHARS = 400

_CAREER_SYSTEM = {
    "en": "You are an expert career advisor for the Saudi/GCC job market. "
          "Analyze the resume and suggest realistic career paths.",
    "ar": "أنت مستشار مهني خبير في سوق العمل السعودي والخليجي. "
          "حلل السيرة الذاتية واقترح مسارات مهنية واقعية.",
}

_ACTION_PLAN_SYSTEM = {
    "en": "You are a career coach. Create a specific, actionable weekly action plan.",
    "ar": "أنت مدرب مهني. أنشئ خطة عمل أسبوعية محددة وقابلة للتنفيذ.",
}

_INSIGHTS_SYSTEM = {
    "en": "You are a Saudi job market expert. Provide insights about a specific industry.",
    "ar": "أنت خبير في سوق العمل السعودي. قدم رؤى حول صناعة محددة.",
}


def _pick(prompts: dict[str, str], locale: str) -> str:
    return prompts.get(locale, prompts["en"])


def _format_highlight(entry: ProfileExperience) -> str:
    period = f"{entry.start_date or '?'} - {'Present' if entry.current else (entry.end_date or '?')}"
    line = f"- {entry.position or 'Role'} at {entry.company or 'Company'} ({period})"
    bullets = [b for b in entry.bullets if b.strip()][:2]
    if bullets:
        line += "\n" + "\n".join(f"  * {b.strip()}" for b in bullets)
    return line


def build_career_system_prompt(locale: str) -> str:
    return _pick(_CAREER_SYSTEM, locale)


def build_career_prompt(
    profile: CareerProfile,
    current_role: str,
    years_experience: float,
    highlights: list[ProfileExperience],
    target_industry: str | None = None,
) -> str:
    """Career analysis request. Highlights must already be newest-first."""
    skills = ", ".join(profile.skills[:MAX_PROMPT_SKILLS]) or "Not provided"
    education = "; ".join(
        f"{e.degree} in {e.field}".strip()
        for e in profile.education[:MAX_PROMPT_EDUCATION]
    ) or "Not provided"
    summary = (profile.summary or "Not provided")[:MAX_SUMMARY_CHARS]
    experience = "\n".join(_format_highlight(e) for e in highlights) or "Not provided"
    certifications = ", ".join(c.name for c in profile.certifications if c.name) or "None"
    projects = ", ".join(p.name for p in profile.projects if p.name) or "None"
    industry_line = f"\nTarget Industry: {target_industry}" if target_industry else ""

    return f"""Analyze this professional's career and provide detailed guidance:

Current Role: {current_role}
Experience: {years_experience} years
Skills: {skills}
Education: {education}
Summary: {summary}
Recent Experience:
{experience}
Certifications: {certifications}
Projects: {projects}{industry_line}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "career_paths": [
    {{
      "id": "path1",
      "name": "<path name>",
      "description": "<brief description>",
      "track": "technical|management|specialist|entrepreneurial",
      "timeline": [
        {{
          "title": "<role title>",
          "years_from_now": <integer>,
          "key_skills": ["<skill>"],
          "description": "<brief role description>"
        }}
      ],
      "probability": <integer 0-100>,
      "requirements": ["<requirement>"]
    }}
  ],
  "skill_gaps": [
    {{
      "skill": "<skill name>",
      "current_level": "none|beginner|intermediate|advanced|expert",
      "required_level": "beginner|intermediate|advanced|expert",
      "priority": "critical|high|medium|low",
      "estimated_time_to_acquire": "<e.g. 3 months>",
      "resources": [{{"name": "<course name>", "type": "course|certification|project|book"}}]
    }}
  ],
  "strengths": ["<strength>"],
  "weekly_actions": [
    {{
      "id": "action1",
      "title": "<action title>",
      "description": "<what to do>",
      "category": "skill|network|project|learning|application",
      "priority": "high|medium|low",
      "estimated_hours": <number>
    }}
  ],
  "industry_insights": {{
    "trending_skills": ["<skill>"],
    "hot_industries": ["<industry>"],
    "saudization_opportunities": ["<opportunity>"],
    "salary_trends": "<brief salary trend description>"
  }}
}}

Generate 1-2 realistic career paths with 2-3 milestones each. Include 2-3 skill gaps, \
3 strengths, and 3 weekly actions. Keep responses concise and compact."""


def build_action_plan_system_prompt(locale: str) -> str:
    return _pick(_ACTION_PLAN_SYSTEM, locale)


def build_action_plan_prompt(
    current_role: str, skills: list[str], target_path: CareerPath, weeks: int
) -> str:
    return f"""Create a {weeks}-week action plan for someone to progress towards:
Target: {target_path.name}
Current Role: {current_role}
Current Skills: {', '.join(skills) or 'Not provided'}
Required Skills: {', '.join(target_path.requirements) or 'Not provided'}

Generate {weeks * 3} specific actions. Respond with ONLY valid JSON in this exact structure:
{{
  "actions": [
    {{
      "id": "week1-1",
      "title": "<action title>",
      "description": "<specific steps>",
      "category": "skill|network|project|learning|application",
      "priority": "high|medium|low",
      "estimated_hours": <number>,
      "week": <integer 1-{weeks}>
    }}
  ]
}}"""


def build_insights_system_prompt(locale: str) -> str:
    return _pick(_INSIGHTS_SYSTEM, locale)


def build_insights_prompt(industry: str) -> str:
    return f"""Provide GCC/Saudi job market insights for the {industry} industry.

Respond with ONLY valid JSON in this exact structure:
{{
  "trending_roles": ["<role>"],
  "salary_trends": "<brief trend description>",
  "top_companies": ["<company>"],
  "in_demand_skills": ["<skill>"],
  "saudization_info": "<Saudization requirements and opportunities>"
}}"""
