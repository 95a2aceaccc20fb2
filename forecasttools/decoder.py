# ABOUTME: Decodes raw forecast response bodies into ForecastPayload models.
# ABOUTME: Empty, failed, or malformed bodies become logged Failure sentinels without affecting other items.

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from forecasttools.dispatcher import RawOutcome
from forecasttools.models import Failure, FailureKind, ForecastPayload

logger = logging.getLogger(__name__)


def decode(raw: RawOutcome) -> ForecastPayload | Failure:
    """Parse one raw outcome, classifying anything unusable as a Failure."""
    if isinstance(raw, Failure):
        logger.warning("No response body to decode: %s", raw.reason)
        return raw

    if not raw or not raw.strip():
        logger.warning("API response was empty")
        return Failure(kind=FailureKind.EMPTY, reason="empty response body")

    try:
        return ForecastPayload.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Cannot decode API response: %s", e)
        return Failure(kind=FailureKind.DECODE, reason=str(e))


def decode_all(raws: Sequence[RawOutcome]) -> list[ForecastPayload | Failure]:
    """Decode each outcome independently, preserving order."""
    return [decode(raw) for raw in raws]
