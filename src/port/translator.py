"""Translator port — outbound interface for translation lookups."""

from typing import Protocol

from domain.model.translation import LookupResult, RawLookupResult


class TranslatorPort(Protocol):
    """Port for looking up a word on a translation endpoint.

    lookup() returns the decoded result, or the verbatim body when
    ``raw`` is True. Failures raise TranslationLookupError.
    """

    def lookup(self, word: str, raw: bool = False) -> LookupResult | RawLookupResult: ...
