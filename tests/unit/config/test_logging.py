"""Tests for logging configuration."""

import pytest

from raw_proxy.config.logging import filter_sensitive_data


@pytest.mark.unit
class TestFilterSensitiveData:
    """Tests for the sensitive-field processor."""

    def test_masks_sensitive_keys(self) -> None:
        event = {"event": "fetch", "token": "s3cret", "password": "pw", "path": "/a/b"}
        result = filter_sensitive_data(None, "info", event)

        assert result["token"] == "[FILTERED]"
        assert result["password"] == "[FILTERED]"
        assert result["path"] == "/a/b"

    def test_leaves_other_events_alone(self) -> None:
        event = {"event": "cache hit", "repo": "group/proj"}
        assert filter_sensitive_data(None, "debug", dict(event)) == event
