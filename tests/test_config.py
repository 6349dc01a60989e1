import pytest

from doctranslate.config import DEFAULT_CHUNK_CHARS, get_settings, reset_settings_cache


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TRANSLATION_PROVIDER", "LOG_LEVEL", "CORS_ORIGINS", "PORT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()

    settings = get_settings()

    assert settings.translation_provider == "google"
    assert settings.chunk_chars == DEFAULT_CHUNK_CHARS == 5000
    assert settings.max_concurrency == 0
    assert settings.pdf_font_path is None
    assert settings.log_level == "INFO"
    assert settings.port == 8000
    assert settings.cors_origins == ("http://localhost:3000",)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSLATION_PROVIDER", " Mock ")
    monkeypatch.setenv("TRANSLATION_CHUNK_CHARS", "1200")
    monkeypatch.setenv("TRANSLATION_MAX_CONCURRENCY", "4")
    monkeypatch.setenv("PDF_FONT_PATH", "/fonts/NotoSans.ttf")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    reset_settings_cache()

    settings = get_settings()

    assert settings.translation_provider == "mock"
    assert settings.chunk_chars == 1200
    assert settings.max_concurrency == 4
    assert settings.pdf_font_path == "/fonts/NotoSans.ttf"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("https://a.example", "https://b.example")


@pytest.mark.parametrize("value", ("many", "0", "-5"))
def test_invalid_chunk_size_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("TRANSLATION_CHUNK_CHARS", value)
    reset_settings_cache()

    assert get_settings().chunk_chars == DEFAULT_CHUNK_CHARS


def test_negative_concurrency_means_unbounded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSLATION_MAX_CONCURRENCY", "-1")
    reset_settings_cache()

    assert get_settings().max_concurrency == 0
