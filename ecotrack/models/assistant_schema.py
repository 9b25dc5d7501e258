from typing import List, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    answer: str


class SuggestionRequest(BaseModel):
    transportEmissions: float = Field(..., description="Transport emissions in kgCO2e")
    energyEmissions: float = Field(..., description="Energy emissions in kgCO2e")
    foodEmissions: float = Field(..., description="Food emissions in kgCO2e")
    recentActivities: str = Field(..., description="Summary of the user's recent activities")


class SuggestionOverrides(BaseModel):
    """Optional client-side figures; anything missing is taken from the user's rollup."""

    transportEmissions: Optional[float] = None
    energyEmissions: Optional[float] = None
    foodEmissions: Optional[float] = None
    recentActivities: Optional[str] = None


class SuggestionResponse(BaseModel):
    suggestions: str


class FaqResponse(BaseModel):
    faqs: List[str]
