"""Normalized career recommendation produced from a model reply."""

from pydantic import BaseModel


class CareerRecommendation(BaseModel):
    """One suggested career path.

    Instances are built by ``structured_extractor.normalize`` so every field
    is always present with the right type, whatever the model returned.
    """
    title: str = ""
    description: str = ""
    key_skills: list[str] = []
