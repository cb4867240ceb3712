"""Plan generator backend selection."""

from __future__ import annotations

import logging

from lesson_planner.config import settings
from lesson_planner.errors import ConfigurationError
from lesson_planner.llm.base import PlanGenerator
from lesson_planner.llm.gemini_client import GeminiGenerator
from lesson_planner.llm.ollama_client import OllamaGenerator

logger = logging.getLogger(__name__)


def get_generator() -> PlanGenerator:
    provider = settings.llm_provider.lower()
    if provider == "gemini":
        return GeminiGenerator(api_key=settings.gemini_api_key, model=settings.gemini_model)
    if provider == "ollama":
        logger.info("Using Ollama model %s", settings.ollama_model)
        return OllamaGenerator()
    raise ConfigurationError(f"Unknown LLM provider: {settings.llm_provider}")
