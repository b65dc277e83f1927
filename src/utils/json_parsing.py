"""JSON decoding for translation endpoint responses."""

import logging

from pydantic import ValidationError as PydanticValidationError

from domain.model.errors import DecodeError
from domain.model.translation import LookupResult

logger = logging.getLogger(__name__)


def decode_lookup_result(body: str) -> LookupResult:
    """Decode a response body into a LookupResult.

    Unknown fields are ignored; missing ``translateResult`` / ``smartResult``
    decode to None.

    Raises:
        DecodeError: If the body is not JSON or a field has the wrong type.
    """
    try:
        result = LookupResult.model_validate_json(body)
    except PydanticValidationError as e:
        logger.debug("Failed to decode lookup response", extra={
            "error_count": e.error_count(),
            "content_preview": body[:200],
        })
        raise DecodeError(str(e)) from e

    if logger.isEnabledFor(logging.DEBUG):
        _log_decoded(result)
    return result


def _log_decoded(result: LookupResult) -> None:
    """Log the decoded result as indented JSON. Best effort."""
    try:
        pretty = result.model_dump_json(by_alias=True, indent=2)
    except ValueError as e:
        logger.debug("Could not re-serialize decoded response", extra={"error": str(e)})
        return
    logger.debug("Received JSON %s", pretty)
