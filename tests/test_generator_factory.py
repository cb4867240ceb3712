"""Tests for generator backend selection and the backends themselves."""

import asyncio
from types import SimpleNamespace

import pytest

from lesson_planner.errors import ConfigurationError
from lesson_planner.llm import generator_factory
from lesson_planner.llm.gemini_client import GeminiGenerator
from lesson_planner.llm.ollama_client import OllamaGenerator
from lesson_planner.prompts.lesson_plan import LessonPrompt


def test_get_generator_returns_gemini_when_key_present(monkeypatch):
    monkeypatch.setattr(generator_factory.settings, "llm_provider", "gemini")
    monkeypatch.setattr(generator_factory.settings, "gemini_api_key", "test-key")
    generator = generator_factory.get_generator()
    assert isinstance(generator, GeminiGenerator)
    assert generator.model_name == generator_factory.settings.gemini_model


def test_get_generator_raises_when_gemini_key_missing(monkeypatch):
    monkeypatch.setattr(generator_factory.settings, "llm_provider", "gemini")
    monkeypatch.setattr(generator_factory.settings, "gemini_api_key", "")
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY environment variable not set"):
        generator_factory.get_generator()


def test_get_generator_returns_ollama_without_credential(monkeypatch):
    monkeypatch.setattr(generator_factory.settings, "llm_provider", "Ollama")
    monkeypatch.setattr(generator_factory.settings, "gemini_api_key", "")
    assert isinstance(generator_factory.get_generator(), OllamaGenerator)


def test_get_generator_rejects_unknown_provider(monkeypatch):
    monkeypatch.setattr(generator_factory.settings, "llm_provider", "carrier-pigeon")
    with pytest.raises(ConfigurationError, match="Unknown LLM provider"):
        generator_factory.get_generator()


def _prompt() -> LessonPrompt:
    return LessonPrompt(instruction="Make a plan", response_schema={"type": "object"})


def test_gemini_generator_requests_json_with_schema():
    captured = {}

    async def _generate_content(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(text='{"title": "Rain"}')

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=_generate_content)))
    generator = GeminiGenerator(api_key="test-key", model="gemini-test", client=client)

    result = asyncio.run(generator.generate(_prompt()))

    assert result == {"title": "Rain"}
    assert captured["model"] == "gemini-test"
    assert captured["contents"] == "Make a plan"
    assert captured["config"].response_mime_type == "application/json"
    assert captured["config"].response_json_schema == {"type": "object"}


def test_gemini_generator_rejects_empty_response():
    async def _generate_content(**_kwargs):
        return SimpleNamespace(text=None)

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=_generate_content)))
    generator = GeminiGenerator(api_key="test-key", client=client)

    with pytest.raises(ValueError, match="Empty response"):
        asyncio.run(generator.generate(_prompt()))


def test_ollama_generator_passes_schema_as_format():
    seen = {}

    class _FakeChatModel:
        async def ainvoke(self, prompt):
            seen["prompt"] = prompt
            return SimpleNamespace(content='```json\n{"title": "Rain"}\n```')

    def _factory(schema):
        seen["schema"] = schema
        return _FakeChatModel()

    result = asyncio.run(OllamaGenerator(chat_model_factory=_factory).generate(_prompt()))

    assert result == {"title": "Rain"}
    assert seen == {"schema": {"type": "object"}, "prompt": "Make a plan"}
