import asyncio
import json
import logging
from typing import Any

import google.generativeai as genai  # type: ignore[import-untyped]
from fastapi import HTTPException
from pydantic import ValidationError

from ..models.assistant_schema import (
    ChatRequest,
    ChatResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from ..settings import settings

logger = logging.getLogger(__name__)

OFF_TOPIC_ANSWER = "sorry my ai model is not trained to give that answer"

FAQS = [
    "How is my carbon footprint calculated?",
    "What are emission factors?",
    "How can I reduce my transport emissions?",
    "What's the most impactful change I can make?",
    "How does my diet affect my carbon footprint?",
    "Is this app free to use?",
]

CHAT_PROMPT = f"""
You are a carbon footprint assistant for the EcoTrack application.
Your role is to answer user questions about carbon emissions, the application,
and how activities impact their carbon footprint.

EcoTrack estimates emissions from logged activities with fixed factors:
travel by distance and fuel/vehicle, food as an average meal plus cooking energy,
household appliances by hours (general electricity by kWh), and waste by kg
generated minus a credit for kg recycled.

If the user message is related to carbon footprint, emissions, activities tracked
in EcoTrack, or sustainability, respond normally.

For queries outside this scope, the answer must be exactly: "{OFF_TOPIC_ANSWER}"

Return ONLY JSON:
{{"answer": "<answer>"}}
""".strip()

SUGGESTION_PROMPT = """
You are an AI assistant that gives personalized carbon reduction suggestions
based on a user's recent activities and emissions data.

Focus on the areas where the user has the highest emissions. Be specific and
give concrete examples. Write the suggestions as a single paragraph.

Return ONLY JSON:
{"suggestions": "<one paragraph>"}
""".strip()


def _get_model() -> genai.GenerativeModel:
    if not settings.gemini_api_key:
        raise HTTPException(status_code=500, detail="GEMINI_API_KEY is not configured")

    try:
        genai.configure(api_key=settings.gemini_api_key)
        return genai.GenerativeModel(
            model_name=settings.gemini_model,
            generation_config={"response_mime_type": "application/json"},
        )
    except Exception as exc:
        logger.exception("Gemini init failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to initialize Gemini client") from exc


def _extract_text(response: Any) -> str:
    try:
        return response.text
    except Exception as exc:
        logger.exception("Failed to extract .text: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to parse Gemini response")


def _clean_json(text: str) -> str:
    cleaned = text.strip()

    # remove ```json and ```
    if cleaned.startswith("```"):
        cleaned = cleaned.replace("```json", "")
        cleaned = cleaned.replace("```", "").strip()

    return cleaned


async def _generate(parts: list) -> dict:
    model = _get_model()

    try:
        response = await asyncio.to_thread(model.generate_content, parts)
    except Exception as exc:
        logger.exception("Gemini request failed: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to contact Gemini")

    raw_text = _extract_text(response)
    clean = _clean_json(raw_text)

    try:
        parsed = json.loads(clean)
    except json.JSONDecodeError:
        logger.exception("Gemini returned invalid JSON\nRAW:\n%s\nCLEAN:\n%s", raw_text, clean)
        raise HTTPException(status_code=502, detail="Gemini returned invalid JSON")

    if not isinstance(parsed, dict):
        logger.error("Gemini returned non-object JSON: %s", parsed)
        raise HTTPException(status_code=502, detail="Gemini JSON schema mismatch")
    return parsed


async def answer_question(payload: ChatRequest) -> ChatResponse:
    parsed = await _generate([CHAT_PROMPT, f"User Query: {payload.message}"])

    try:
        return ChatResponse.model_validate(parsed)
    except ValidationError:
        logger.exception("Schema mismatch: %s", parsed)
        raise HTTPException(status_code=502, detail="Gemini JSON schema mismatch")


async def suggest_actions(payload: SuggestionRequest) -> SuggestionResponse:
    user_prompt = f"""
Here's a summary of the user's recent activities: {payload.recentActivities}

Here's a breakdown of their emissions:
- Transportation: {payload.transportEmissions:.2f} kgCO2e
- Energy: {payload.energyEmissions:.2f} kgCO2e
- Food: {payload.foodEmissions:.2f} kgCO2e
""".strip()

    parsed = await _generate([SUGGESTION_PROMPT, user_prompt])

    try:
        return SuggestionResponse.model_validate(parsed)
    except ValidationError:
        logger.exception("Schema mismatch: %s", parsed)
        raise HTTPException(status_code=502, detail="Gemini JSON schema mismatch")
