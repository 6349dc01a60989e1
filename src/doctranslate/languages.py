"""Target languages offered to clients."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Language:
    code: str
    name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("te", "Telugu"),
    Language("ta", "Tamil"),
    Language("kn", "Kannada"),
    Language("ml", "Malayalam"),
    Language("bn", "Bengali"),
    Language("gu", "Gujarati"),
    Language("mr", "Marathi"),
    Language("pa", "Punjabi"),
    Language("ur", "Urdu"),
    Language("nl", "Dutch"),
    Language("pl", "Polish"),
    Language("tr", "Turkish"),
    Language("vi", "Vietnamese"),
    Language("th", "Thai"),
    Language("id", "Indonesian"),
    Language("cs", "Czech"),
    Language("sv", "Swedish"),
    Language("da", "Danish"),
    Language("fi", "Finnish"),
    Language("no", "Norwegian"),
    Language("he", "Hebrew"),
    Language("uk", "Ukrainian"),
)
