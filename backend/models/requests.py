from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.session import User


class ProfileIntake(BaseModel):
    """Answers collected by the multi-step profile form."""
    # Step 0: Education
    education_level: str = ""
    field_of_study: str = ""
    institution: str = ""
    year_of_completion: str = ""
    # Step 1: Career
    current_status: str = ""
    work_experience: str = ""
    skills: list[str] = []
    # Step 2: Interests & Goals
    interests: list[str] = []
    career_goals: str = Field("", max_length=2000)
    # Step 3: Additional Info
    preferred_work_environment: str = ""
    preferred_work_location: str = ""
    salary_expectations: str = ""
    willing_to_relocate: bool = False


class ChatMessage(BaseModel):
    sender: Literal["user", "ai"]
    text: str = Field(..., max_length=20000)
    category: str | None = None


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=5000, description="The user's new message")
    history: list[ChatMessage] = []
    category: str = ""


class TextRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Raw model reply text")


class ProfileValidateRequest(BaseModel):
    profile: ProfileIntake
    step: int | None = Field(None, ge=0, le=3, description="Validate one step, or all when omitted")


class LoginRequest(BaseModel):
    """User and token as returned by the authentication backend."""
    user: User
    token: str = Field(..., min_length=1)
