"""Translation service: looks a word up and turns the result into text."""

import logging

from domain.model.errors import ValidationError
from domain.model.translation import LookupQuery, RawLookupResult
from port.formatter import Formatter
from port.translator import TranslatorPort
from services.rendering import render

logger = logging.getLogger(__name__)


class TranslationService:
    """Glues a TranslatorPort to a Formatter.

    Errors raised by the translator propagate unchanged.
    """

    def __init__(self, translator: TranslatorPort, formatter: Formatter):
        self.translator = translator
        self.formatter = formatter

    def explain(self, word: str, raw: bool = False) -> str:
        """Return the rendered lookup for ``word``, or the raw body if ``raw``."""
        if not word.strip():
            raise ValidationError("word must not be blank")
        query = LookupQuery(word=word, raw=raw)

        result = self.translator.lookup(query.word, raw=query.raw)
        if isinstance(result, RawLookupResult):
            return result.body

        logger.debug("Rendering lookup result", extra={
            "word": query.word,
            "error_code": result.error_code,
            "has_translation": result.has_translation,
        })
        return render(result, self.formatter)
