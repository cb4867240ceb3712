"""Gemini-backed plan generator."""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types as genai_types

from lesson_planner.errors import ConfigurationError
from lesson_planner.prompts.lesson_plan import LessonPrompt
from lesson_planner.utils.llm_parse import load_json_object

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """Generate lesson plans with the Gemini API using JSON-constrained output."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", client=None) -> None:
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY environment variable not set")
        self.model_name = model
        self.client = client or genai.Client(api_key=api_key)

    async def generate(self, prompt: LessonPrompt) -> dict[str, Any]:
        logger.info("Gemini call started (model=%s)", self.model_name)
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt.instruction,
            config=genai_types.GenerateContentConfig(
                response_mime_type="application/json",
                response_json_schema=prompt.response_schema,
            ),
        )
        logger.info("Gemini call finished")
        text = response.text
        if text is None:
            raise ValueError("Empty response from API")
        return load_json_object(text)
