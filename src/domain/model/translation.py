"""Translation lookup domain models.

Wire names from the Youdao response (``errorCode``, ``translateResult``,
``src``/``tgt`` ...) are mapped to snake_case attributes through aliases.
Dump with ``by_alias=True`` to get the wire shape back.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class LookupQuery:
    """A single lookup request."""
    word: str
    raw: bool = False


class _WireModel(BaseModel):
    # strict: "0", true and 1.0 are not integers
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)


class TranslationSentence(_WireModel):
    """One source/target text pair."""
    source: str = Field(..., alias="src")
    target: str = Field(..., alias="tgt")


# Sentences in original text order.
TranslationParagraph = list[TranslationSentence]


class SmartResult(_WireModel):
    """Alternative entries suggested by the dictionary."""
    entries: list[str]
    result_type: int = Field(..., alias="type", description="Informational only")


class LookupResult(_WireModel):
    """Decoded response of the translation endpoint."""
    error_code: int = Field(..., alias="errorCode")
    translate_result: Optional[list[TranslationParagraph]] = Field(None, alias="translateResult")
    smart_result: Optional[SmartResult] = Field(None, alias="smartResult")

    @property
    def has_translation(self) -> bool:
        """False when the endpoint reported an error or returned no paragraphs."""
        return self.error_code == 0 and self.translate_result is not None

    def iter_sentences(self):
        """Yield every sentence, paragraph by paragraph, in input order."""
        for paragraph in self.translate_result or []:
            yield from paragraph


@dataclass(frozen=True)
class RawLookupResult:
    """Response body exactly as received."""
    body: str

    def __str__(self) -> str:
        return self.body
