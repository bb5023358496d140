"""Keyword-based career track inference and the per-track skill taxonomy."""

import re

# Checked in order, first match wins.
_TRACK_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("management", re.compile(r"manager|lead|director|head|chief")),
    ("entrepreneurial", re.compile(r"founder|startup")),
    ("technical", re.compile(r"engineer|developer|data|analyst|devops|security")),
]
DEFAULT_TRACK = "specialist"

# Canonical skills per track, most important first
TRACK_SKILLS: dict[str, list[str]] = {
    "technical": [
        "System Design",
        "Cloud Architecture",
        "CI/CD",
        "Automated Testing",
        "Technical Mentoring",
        "Security Best Practices",
    ],
    "management": [
        "People Leadership",
        "Strategic Planning",
        "Stakeholder Management",
        "Budgeting",
        "Performance Management",
        "Change Management",
    ],
    "specialist": [
        "Domain Expertise",
        "Data Analysis",
        "Process Improvement",
        "Project Management",
        "Professional Certification",
        "Communication",
    ],
    "entrepreneurial": [
        "Business Development",
        "Fundraising",
        "Product Strategy",
        "Financial Modeling",
        "Go-to-Market",
        "Team Building",
    ],
}


def infer_track(role_title: str) -> str:
    """Map a role title to one of the four career tracks."""
    title = (role_title or "").lower()
    for track, pattern in _TRACK_PATTERNS:
        if pattern.search(title):
            return track
    return DEFAULT_TRACK
