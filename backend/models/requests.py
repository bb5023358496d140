from pydantic import BaseModel, Field

from models.schemas.career_analysis import CareerPath, Locale
from models.schemas.career_profile import CareerProfile


class CareerOptions(BaseModel):
    locale: Locale = "en"
    target_industry: str | None = Field(default=None, max_length=200)
    user_id: str | None = None


class CareerAnalyzeRequest(BaseModel):
    resume: CareerProfile
    options: CareerOptions = CareerOptions()


class ActionPlanRequest(BaseModel):
    resume: CareerProfile
    target_path: CareerPath
    weeks: int = Field(default=4, ge=1, le=12)
    options: CareerOptions = CareerOptions()


class IndustryInsightsRequest(BaseModel):
    industry: str = Field(..., min_length=1, max_length=200)
    options: CareerOptions = CareerOptions()
