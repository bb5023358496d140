"""Input contract: a resume already normalized into the career profile shape."""

from pydantic import BaseModel


class ProfileExperience(BaseModel):
    """A single employment interval. Dates are free-form strings."""
    position: str = ""
    company: str = ""
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    bullets: list[str] = []


class ProfileEducation(BaseModel):
    degree: str = ""
    field: str = ""


class ProfileCertification(BaseModel):
    name: str = ""


class ProfileProject(BaseModel):
    name: str = ""


class ProfileContact(BaseModel):
    linkedin: str | None = None


class CareerProfile(BaseModel):
    """Everything the career engine reads from a resume.

    All fields default to empty so that an empty profile is still valid input.
    """
    target_role: str | None = None
    summary: str | None = None
    skills: list[str] = []
    education: list[ProfileEducation] = []
    certifications: list[ProfileCertification] = []
    projects: list[ProfileProject] = []
    experience: list[ProfileExperience] = []
    contact: ProfileContact = ProfileContact()
