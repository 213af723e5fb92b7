"""Dashboard insight card."""

from typing import Literal

from pydantic import BaseModel


class CareerInsight(BaseModel):
    title: str
    description: str = ""
    action_items: list[str] = []
    priority: Literal["high", "medium", "low"] = "medium"
