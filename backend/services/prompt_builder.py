"""All prompt templates for Gemini API calls."""

from models.requests import ProfileIntake

CHAT_CATEGORIES: dict[str, str] = {
    "general": "General Career Guidance",
    "skills": "Skills Development",
    "transition": "Career Transition",
    "interview": "Interview Preparation",
    "salary": "Salary & Negotiation",
    "networking": "Professional Networking",
    "industry": "Industry Insights",
    "education": "Education & Certifications",
}

RECOMMENDATION_SYSTEM_PROMPT = (
    "Reply with ONLY valid minified JSON (array of objects with keys: "
    "title, description, key_skills). No prose, no markdown."
)


def _join(values: list[str]) -> str:
    return ", ".join(v for v in values if v) or "not specified"


def describe_profile(profile: ProfileIntake) -> str:
    """Human-readable profile summary used in prompts and the chat transcript."""
    lines = [
        f"- Skills: {_join(profile.skills)}",
        f"- Interests: {_join(profile.interests)}",
    ]
    optional = [
        ("Education", " in ".join(v for v in (profile.education_level, profile.field_of_study) if v)),
        ("Institution", profile.institution),
        ("Current status", profile.current_status),
        ("Work experience", profile.work_experience),
        ("Career goals", profile.career_goals),
        ("Preferred work environment", profile.preferred_work_environment),
        ("Preferred location", profile.preferred_work_location),
        ("Salary expectations", profile.salary_expectations),
    ]
    lines.extend(f"- {label}: {value}" for label, value in optional if value)
    if profile.willing_to_relocate:
        lines.append("- Willing to relocate: yes")
    return "\n".join(lines)


def build_recommendation_prompt(profile: ProfileIntake, count: int = 3) -> str:
    """Ask for career paths as a JSON array of recommendation objects."""
    return f"""Based on the following user profile, recommend {count} career paths. For each path, provide a "title", a "description", and an array of 3 "key_skills". Return ONLY valid JSON (array of objects) with no extra text.
User Profile:
{describe_profile(profile)}"""


def build_chat_system_prompt(category: str = "") -> str:
    focus = CHAT_CATEGORIES.get(category, category) or "general career advice"
    return f"""You are Careerion AI, providing comprehensive career guidance.
Focus on: {focus}.
Provide detailed, actionable advice with specific steps, resources, and recommendations.
Use short markdown: headers (##), bullet points and numbered steps. No tables."""


def build_insights_prompt(count: int = 4) -> str:
    return f"""Generate {count} personalized career insights and action items. Focus on immediate actionable steps to advance a career.

Format each insight exactly like this:
## <insight title>
<one sentence description>
- <action item>
- <action item>
- <action item>

Order the insights from most to least important."""
