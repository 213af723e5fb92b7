"""Domain entities shared by the interpretation pipeline and the API."""

from models.schemas.career_insight import CareerInsight
from models.schemas.career_recommendation import CareerRecommendation
from models.schemas.display_block import (
    BulletBlock,
    DisplayBlock,
    HeaderBlock,
    NumberedBlock,
    ParagraphBlock,
)
from models.schemas.interpreted_reply import (
    ExtractionFailure,
    ExtractionResult,
    InterpretedReply,
    ProseReply,
    StructuredReply,
    Unparsable,
)
from models.schemas.session import SessionState, User

__all__ = [
    "CareerInsight",
    "CareerRecommendation",
    "DisplayBlock",
    "HeaderBlock",
    "BulletBlock",
    "NumberedBlock",
    "ParagraphBlock",
    "ExtractionFailure",
    "ExtractionResult",
    "InterpretedReply",
    "StructuredReply",
    "ProseReply",
    "Unparsable",
    "SessionState",
    "User",
]
