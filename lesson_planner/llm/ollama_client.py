"""Ollama-backed chat model factory and plan generator."""

from __future__ import annotations

import logging
from typing import Any

from langchain_ollama import ChatOllama

from lesson_planner.config import settings
from lesson_planner.prompts.lesson_plan import LessonPrompt
from lesson_planner.utils.llm_parse import load_json_object

logger = logging.getLogger(__name__)


def get_chat_model(response_schema: dict[str, Any] | None = None):
    """Return a ChatOllama instance configured from settings.

    Parameters
    ----------
    response_schema : dict, optional
        JSON schema passed as Ollama's ``format`` so the reply is constrained
        to that shape.

    Returns
    -------
    langchain_ollama.ChatOllama
        A chat model connected to the local Ollama server.
    """
    return ChatOllama(
        base_url=settings.ollama_base_url,
        model=settings.ollama_model,
        format=response_schema,
        client_kwargs={"timeout": settings.ollama_timeout_seconds},
    )


class OllamaGenerator:
    """Generate lesson plans with a local Ollama model."""

    def __init__(self, chat_model_factory=get_chat_model) -> None:
        self._chat_model_factory = chat_model_factory

    async def generate(self, prompt: LessonPrompt) -> dict[str, Any]:
        llm = self._chat_model_factory(prompt.response_schema)
        logger.info("Ollama call started")
        response = await llm.ainvoke(prompt.instruction)
        logger.info("Ollama call finished")
        content = getattr(response, "content", str(response))
        return load_json_object(content)
