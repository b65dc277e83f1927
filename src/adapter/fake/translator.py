"""In-memory implementation of TranslatorPort for testing."""

from domain.model.translation import LookupResult, RawLookupResult


class FakeTranslatorAdapter:
    """Fake translator that returns a preconfigured result or raises an error."""

    def __init__(
        self,
        result: LookupResult | None = None,
        body: str = "{}",
        error: Exception | None = None,
    ):
        self.result = result
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    def lookup(self, word: str, raw: bool = False) -> LookupResult | RawLookupResult:
        self.calls.append({"word": word, "raw": raw})
        if self.error is not None:
            raise self.error
        if raw:
            return RawLookupResult(self.body)
        return self.result or LookupResult(error_code=1)
