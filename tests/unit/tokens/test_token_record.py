"""Unit tests for the plaintext token record codec."""
from datetime import UTC, datetime, timedelta, timezone

import pytest

from credkit.tokens.record import format_expiry, format_record, parse_expiry, split_record


class TestFormatExpiry:
    def test_second_precision_utc(self) -> None:
        moment = datetime(2026, 1, 1, 12, 30, 0, 999_999, tzinfo=UTC)
        assert format_expiry(moment) == "2026-01-01T12:30:00Z"

    def test_converts_offsets_to_utc(self) -> None:
        moment = datetime(2026, 1, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_expiry(moment) == "2026-01-01T12:30:00Z"


class TestParseExpiry:
    @pytest.mark.parametrize(
        "text",
        ["2026-01-01T12:30:00Z", "2026-01-01t12:30:00z", "2026-01-01T14:30:00+02:00", "2026-01-01T07:30:00-05:00"],
    )
    def test_accepts_rfc3339(self, text) -> None:
        assert parse_expiry(text) == datetime(2026, 1, 1, 12, 30, tzinfo=UTC)

    def test_fractional_seconds(self) -> None:
        assert parse_expiry("2026-01-01T12:30:00.5Z").microsecond == 500_000
        assert parse_expiry("2026-01-01T12:30:00.123456789Z").microsecond == 123_456

    @pytest.mark.parametrize(
        "text",
        ["", "tomorrow", "2026-01-01", "2026-01-01T12:30:00", "2026-13-01T12:30:00Z", "2026-01-01 12:30:00Z"],
    )
    def test_rejects_invalid(self, text) -> None:
        with pytest.raises(ValueError):
            parse_expiry(text)

    def test_round_trip(self) -> None:
        moment = datetime(2031, 7, 4, 8, 15, 42, tzinfo=UTC)
        assert parse_expiry(format_expiry(moment)) == moment


class TestRecord:
    def test_format(self) -> None:
        expiry = datetime(2026, 1, 1, 12, 30, tzinfo=UTC)
        assert format_record("session", b"bla bla FOO!BAR", expiry) == (
            "session.YmxhIGJsYSBGT08hQkFS.2026-01-01T12:30:00Z"
        )

    def test_payload_dots_cannot_break_fields(self) -> None:
        record = format_record("k", b"a.b.c", datetime(2026, 1, 1, tzinfo=UTC))
        assert record.count(".") == 2

    def test_split(self) -> None:
        assert split_record(b"kind.cGF5.2026-01-01T12:30:00Z") == ("kind", "cGF5", "2026-01-01T12:30:00Z")

    def test_split_keeps_extra_separators_in_last_field(self) -> None:
        assert split_record(b"a.b.c.d") == ("a", "b", "c.d")

    @pytest.mark.parametrize("plain", [b"", b"only", b"two.parts", b"\xff.a.b"])
    def test_split_rejects_malformed(self, plain) -> None:
        with pytest.raises(ValueError):
            split_record(plain)
