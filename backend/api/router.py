from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_session_store
from models.requests import ChatRequest, LoginRequest, ProfileIntake, ProfileValidateRequest, TextRequest
from models.responses import (
    ChatResponse,
    ExtractResponse,
    FormatResponse,
    ProfileOptionsResponse,
    ProfileValidationResponse,
    RecommendationsResponse,
    SessionResponse,
)
from models.schemas.career_insight import CareerInsight
from services import (
    chat_service,
    gemini_client,
    insights_service,
    profile_intake,
    prompt_builder,
    recommendation_service,
)
from services.display_formatter import blocks_to_text, format_blocks
from services.gemini_client import LLMUnavailableError
from services.session_state import SessionStore
from services.structured_extractor import extract_recommendations

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

AI_UNAVAILABLE = "AI service unavailable. Please try again later."


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
    }


@router.post("/recommendations", response_model=RecommendationsResponse)
@limiter.limit("10/minute")
async def recommendations(request: Request, body: ProfileIntake):
    errors = profile_intake.validate_profile(body)
    if errors:
        raise HTTPException(status_code=400, detail={"errors": errors})

    try:
        return await recommendation_service.get_recommendations(body)
    except LLMUnavailableError:
        raise HTTPException(status_code=503, detail=AI_UNAVAILABLE)
    except recommendation_service.RecommendationError:
        raise HTTPException(status_code=502, detail=recommendation_service.USER_FACING_ERROR)


@router.post("/chat", response_model=ChatResponse)
@limiter.limit("10/minute")
async def chat(request: Request, body: ChatRequest):
    if body.category and body.category not in prompt_builder.CHAT_CATEGORIES:
        raise HTTPException(status_code=400, detail=f"Unknown chat category: {body.category}")
    try:
        return await chat_service.send_message(body.message, body.history, body.category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LLMUnavailableError:
        raise HTTPException(
            status_code=503,
            detail="Sorry, I encountered an issue. Please try again or rephrase your question.",
        )


@router.get("/insights", response_model=list[CareerInsight])
@limiter.limit("10/minute")
async def insights(request: Request):
    return await insights_service.generate_insights()


@router.post("/format", response_model=FormatResponse)
async def format_text(body: TextRequest):
    blocks = format_blocks(body.text)
    return FormatResponse(blocks=blocks, plain=blocks_to_text(blocks))


@router.post("/extract", response_model=ExtractResponse)
async def extract(body: TextRequest):
    items, reason = extract_recommendations(body.text)
    return ExtractResponse(ok=reason is None, reason=reason, recommendations=items)


@router.post("/profile/validate", response_model=ProfileValidationResponse)
async def validate_profile(body: ProfileValidateRequest):
    if body.step is None:
        errors = profile_intake.validate_profile(body.profile)
    else:
        errors = profile_intake.validate_step(body.profile, body.step)
    return ProfileValidationResponse(
        valid=not errors,
        errors=errors,
        completeness=profile_intake.profile_completeness(body.profile),
    )


@router.get("/profile/options", response_model=ProfileOptionsResponse)
async def profile_options():
    return ProfileOptionsResponse(
        steps=profile_intake.PROFILE_STEPS,
        education_levels=profile_intake.EDUCATION_LEVELS,
        fields_of_study=profile_intake.FIELDS_OF_STUDY,
        interests=profile_intake.INTERESTS,
        skills=profile_intake.SKILLS,
        chat_categories=prompt_builder.CHAT_CATEGORIES,
    )


def _session_response(store: SessionStore) -> SessionResponse:
    state = store.state
    return SessionResponse(authenticated=state.is_authenticated, user=state.current_user)


@router.get("/session", response_model=SessionResponse)
async def session(store: SessionStore = Depends(get_session_store)):
    return _session_response(store)


@router.post("/session/login", response_model=SessionResponse)
async def login(body: LoginRequest, store: SessionStore = Depends(get_session_store)):
    store.login(body.user, body.token)
    return _session_response(store)


@router.post("/session/logout", response_model=SessionResponse)
async def logout(store: SessionStore = Depends(get_session_store)):
    store.logout()
    return _session_response(store)
