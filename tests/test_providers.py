"""Tests for translation provider implementations and selection."""
from __future__ import annotations

import asyncio

import pytest

from doctranslate.config import reset_settings_cache
from doctranslate.translation import providers
from doctranslate.translation.providers import (
    GoogleTranslationProvider,
    MockTranslationProvider,
    get_translation_provider,
    reset_translation_provider_cache,
)


class _RecordingGoogleTranslator:
    instances: list["_RecordingGoogleTranslator"] = []

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        self.texts: list[str] = []
        _RecordingGoogleTranslator.instances.append(self)

    def translate(self, text: str) -> str:
        self.texts.append(text)
        return f"{self.target}:{text}"


@pytest.fixture
def recording_translator(monkeypatch: pytest.MonkeyPatch) -> type[_RecordingGoogleTranslator]:
    _RecordingGoogleTranslator.instances = []
    monkeypatch.setattr(providers, "GoogleTranslator", _RecordingGoogleTranslator)
    return _RecordingGoogleTranslator


def test_google_provider_delegates_to_deep_translator(recording_translator) -> None:
    result = asyncio.run(GoogleTranslationProvider().translate("Hello", "es"))

    assert result == "es:Hello"
    (instance,) = recording_translator.instances
    assert instance.source == "auto"
    assert instance.texts == ["Hello"]


@pytest.mark.parametrize(("code", "expected"), (("zh", "zh-CN"), ("he", "iw"), ("fr", "fr"), ("auto", "auto")))
def test_google_provider_normalises_language_codes(code: str, expected: str) -> None:
    assert GoogleTranslationProvider.normalise_language(code) == expected


def test_google_provider_maps_target_alias(recording_translator) -> None:
    asyncio.run(GoogleTranslationProvider().translate("Hello", "zh", "en"))

    (instance,) = recording_translator.instances
    assert (instance.source, instance.target) == ("en", "zh-CN")


def test_mock_provider_is_deterministic() -> None:
    provider = MockTranslationProvider()

    first = asyncio.run(provider.translate("Hello", "de"))
    second = asyncio.run(provider.translate("Hello", "de"))

    assert first == second == "[de] Hello"
    assert len(provider.calls) == 2


def test_factory_selects_backend_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    assert isinstance(get_translation_provider(), MockTranslationProvider)
    assert get_translation_provider() is get_translation_provider()

    monkeypatch.setenv("TRANSLATION_PROVIDER", "google")
    reset_settings_cache()
    reset_translation_provider_cache()

    assert isinstance(get_translation_provider(), GoogleTranslationProvider)


def test_factory_rejects_unknown_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSLATION_PROVIDER", "babelfish")
    reset_settings_cache()
    reset_translation_provider_cache()

    with pytest.raises(ValueError):
        get_translation_provider()
