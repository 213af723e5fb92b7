from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.session_state import SessionStore

app = FastAPI(
    title="Careerion API",
    description="AI-assisted career guidance: recommendations, chat and insights",
    version="1.0.0",
)

app.state.limiter = limiter
app.state.session_store = SessionStore(settings.session_file)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
