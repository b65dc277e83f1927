"""Youdao web translation adapter.

Implements TranslatorPort by signing a form request the way the
fanyi.youdao.com web page does and posting it to the translate endpoint.

The endpoint expects browser-like headers and a duplicated ``smartresult``
query parameter; requests lacking them are rejected or degraded.
"""

import hashlib
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

import httpx

from domain.model.errors import TranslationLookupError
from domain.model.translation import LookupResult, RawLookupResult
from utils.json_parsing import decode_lookup_result

logger = logging.getLogger(__name__)

YOUDAO_TRANSLATE_URL = "https://fanyi.youdao.com/translate_o"
YOUDAO_HOST = "fanyi.youdao.com"

# Both values are required, in this order.
SMARTRESULT_QUERY = [("smartresult", "dict"), ("smartresult", "rule")]

APP_VERSION = "5.0 (X11)"

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:102.0) Gecko/20100101 Firefox/102.0",
    "Host": YOUDAO_HOST,
    "Origin": f"https://{YOUDAO_HOST}",
    "Referer": f"https://{YOUDAO_HOST}/",
    "Cookie": "OUTFOX_SEARCH_USER_ID=0@0.0.0.0",
    "X-Requested-With": "XMLHttpRequest",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
}

# (primary, legacy, default)
CLIENT_ID_SOURCES = ("YDCV_API_NAME", "YDCV_YOUDAO_APPID", "fanyideskweb")
API_SECRET_SOURCES = ("YDCV_API_KEY", "YDCV_YOUDAO_APPSEC", "Ygy_4c=r#e#4EX^NUGUc5")


# ── Configuration ────────────────────────────────────────────


def _resolve(environ: Mapping[str, str], primary: str, legacy: str, default: str) -> str:
    """First variable that is set wins, even when empty."""
    if primary in environ:
        return environ[primary]
    if legacy in environ:
        return environ[legacy]
    return default


@dataclass(frozen=True)
class YoudaoConfig:
    """Read-only API credentials, built once at start-up."""
    client_id: str = CLIENT_ID_SOURCES[2]
    api_secret: str = field(default=API_SECRET_SOURCES[2], repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "YoudaoConfig":
        """Resolve credentials: primary variable → legacy variable → built-in default."""
        if environ is None:
            environ = os.environ
        return cls(
            client_id=_resolve(environ, *CLIENT_ID_SOURCES),
            api_secret=_resolve(environ, *API_SECRET_SOURCES),
        )


# ── Signing ──────────────────────────────────────────────────


def _md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def compute_bv(app_version: str = APP_VERSION) -> str:
    """Browser version hash sent as ``bv``."""
    return _md5_hex(app_version)


def compute_sign(client_id: str, word: str, timestamp: str, api_secret: str) -> str:
    """Request signature: md5 of the plain concatenation of the four values."""
    return _md5_hex(f"{client_id}{word}{timestamp}{api_secret}")


def current_timestamp() -> str:
    """Epoch time in milliseconds, as text."""
    return str(int(time.time() * 1000))


# ── Adapter ──────────────────────────────────────────────────


class YoudaoTranslatorAdapter:
    """Adapter that looks up words on the Youdao web translation endpoint.

    Holds one httpx.Client. A client passed in by the caller is left open;
    one created here is closed by close() or on leaving a ``with`` block.
    """

    def __init__(
        self,
        config: YoudaoConfig | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        clock: Callable[[], str] = current_timestamp,
    ):
        self.config = config or YoudaoConfig()
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=timeout) if timeout is not None else httpx.Client()
        self._client = client
        self._clock = clock

    def __enter__(self) -> "YoudaoTranslatorAdapter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def build_form(self, word: str, timestamp: str) -> dict[str, str]:
        """Build the signed POST form body, in wire order."""
        return {
            "i": word,
            "from": "AUTO",
            "to": "AUTO",
            "smartresult": "dict",
            "client": self.config.client_id,
            "doctype": "json",
            "version": "2.1",
            "keyfrom": "fanyi.web",
            "action": "FY_BY_DEFAULT",
            "bv": compute_bv(),
            "lts": timestamp,
            "salt": timestamp,
            "sign": compute_sign(self.config.client_id, word, timestamp, self.config.api_secret),
        }

    def lookup(self, word: str, raw: bool = False) -> LookupResult | RawLookupResult:
        """Look up a word.

        Args:
            word: Text to translate.
            raw: Return the body verbatim instead of decoding it.

        Returns:
            RawLookupResult when ``raw`` is True, LookupResult otherwise.

        Raises:
            TranslationLookupError: On connection failure or non-2xx status.
            DecodeError: If ``raw`` is False and the body cannot be decoded.
        """
        timestamp = self._clock()
        form = self.build_form(word, timestamp)
        logger.debug("Posting translation request", extra={"word": word, "lts": timestamp})

        try:
            response = self._client.post(
                YOUDAO_TRANSLATE_URL,
                params=SMARTRESULT_QUERY,
                data=form,
                headers=REQUEST_HEADERS,
            )
            response.raise_for_status()
            body = response.text
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Youdao HTTP error",
                extra={"word": word, "status_code": e.response.status_code},
            )
            raise TranslationLookupError(
                f"Youdao returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Youdao request error",
                extra={"word": word, "error_type": type(e).__name__},
            )
            raise TranslationLookupError(f"Request to Youdao failed: {e}") from e

        if raw:
            return RawLookupResult(body)
        return decode_lookup_result(body)
