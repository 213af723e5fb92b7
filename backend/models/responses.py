from pydantic import BaseModel

from models.requests import ChatMessage
from models.schemas.career_recommendation import CareerRecommendation
from models.schemas.display_block import DisplayBlock
from models.schemas.interpreted_reply import ExtractionFailure
from models.schemas.session import User


class RecommendationsResponse(BaseModel):
    recommendations: list[CareerRecommendation] = []
    # Seed transcript for the follow-up chat
    history: list[ChatMessage] = []


class ChatResponse(BaseModel):
    response: str = ""
    blocks: list[DisplayBlock] = []
    category: str = ""


class FormatResponse(BaseModel):
    blocks: list[DisplayBlock] = []
    plain: str = ""


class ExtractResponse(BaseModel):
    ok: bool = False
    reason: ExtractionFailure | None = None
    recommendations: list[CareerRecommendation] = []


class ProfileValidationResponse(BaseModel):
    valid: bool = True
    errors: dict[str, str] = {}
    completeness: float = 0.0


class ProfileOptionsResponse(BaseModel):
    steps: list[str] = []
    education_levels: list[str] = []
    fields_of_study: list[str] = []
    interests: list[str] = []
    skills: list[str] = []
    chat_categories: dict[str, str] = {}


class SessionResponse(BaseModel):
    authenticated: bool = False
    user: User | None = None
