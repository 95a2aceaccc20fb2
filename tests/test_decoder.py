# ABOUTME: Contract tests for raw response decoding.
# ABOUTME: Validates success parsing, empty and malformed body handling, and per-item isolation.

import logging

from forecasttools.decoder import decode, decode_all
from forecasttools.models import Failure, FailureKind, ForecastPayload


class TestDecode:
    def test_valid_body_becomes_payload(self, sample_body):
        """A well-formed body decodes into a ForecastPayload.

        Implementation: Decodes the shared sample body.
        Passing implies: Provider fields survive decoding and are reachable by name.
        """
        payload = decode(sample_body)
        assert isinstance(payload, ForecastPayload)
        assert payload.latitude == 37.8267
        assert payload.hourly.data[1].temperature == 59.2

    def test_decode_is_idempotent(self, sample_body):
        """Decoding the same body twice yields equal payloads.

        Implementation: Decodes one body twice and compares.
        Passing implies: Decoding is a pure function of its input.
        """
        assert decode(sample_body) == decode(sample_body)

    def test_empty_body_is_failure(self, caplog):
        """Empty or whitespace bodies become EMPTY failures without a parse attempt.

        Implementation: Decodes "" and "  \\n" with log capture.
        Passing implies: Responses with no content are reported, not parsed.
        """
        with caplog.at_level(logging.WARNING, logger="forecasttools.decoder"):
            for body in ("", "  \n"):
                result = decode(body)
                assert isinstance(result, Failure)
                assert result.kind is FailureKind.EMPTY
        assert "empty" in caplog.text

    def test_malformed_body_is_failure(self, caplog):
        """Bodies that are not JSON, or not a forecast, become DECODE failures.

        Implementation: Decodes truncated JSON, a JSON list, and an API error document.
        Passing implies: Unparseable input is logged and turned into a sentinel, never raised.
        """
        bodies = ['{"latitude": 1', "[1, 2]", '{"code": 403, "error": "permission denied"}']
        with caplog.at_level(logging.WARNING, logger="forecasttools.decoder"):
            results = [decode(b) for b in bodies]
        assert all(isinstance(r, Failure) and r.kind is FailureKind.DECODE for r in results)
        assert caplog.text.count("Cannot decode") == 3

    def test_failure_passes_through(self):
        """A transport failure is returned unchanged.

        Implementation: Decodes a TRANSPORT Failure.
        Passing implies: The original failure reason reaches the caller.
        """
        failure = Failure(kind=FailureKind.TRANSPORT, reason="timed out", url="https://x")
        assert decode(failure) is failure


class TestDecodeAll:
    def test_isolates_bad_items(self, sample_body):
        """One bad body does not affect its neighbours.

        Implementation: Decodes [good, malformed, good].
        Passing implies: Only the middle item becomes a Failure and order is preserved.
        """
        results = decode_all([sample_body, "not json", sample_body])
        assert isinstance(results[0], ForecastPayload)
        assert isinstance(results[1], Failure)
        assert isinstance(results[2], ForecastPayload)
