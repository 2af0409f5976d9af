"""Tests for the options normalizer (core/options.py).

Coverage:
* Allow-listed keys are copied with their values untouched.
* Keys outside the allow-list are dropped.
* Allow-listed keys absent from the input stay absent.
* The allow-list matches the ``NormalizedRequest`` schema.
"""

from __future__ import annotations

from typing import Any

from cypress_cli.core.models import NormalizedRequest
from cypress_cli.core.options import ALLOWED_KEYS, normalize


class TestAllowList:
    def test_matches_normalized_request_keys(self) -> None:
        assert ALLOWED_KEYS == NormalizedRequest.__optional_keys__

    def test_has_thirteen_keys(self) -> None:
        assert len(ALLOWED_KEYS) == 13

    def test_project_is_not_allowed(self) -> None:
        assert "project" not in ALLOWED_KEYS


class TestNormalize:
    def test_copies_allowed_keys(self) -> None:
        parsed = {"spec": "a.test.js", "record": False, "port": "8080"}
        assert normalize(parsed) == parsed

    def test_drops_unknown_keys(self) -> None:
        parsed = {"spec": "a.test.js", "project": "/tmp/app", "verbose": True}
        assert normalize(parsed) == {"spec": "a.test.js"}

    def test_absent_keys_stay_absent(self) -> None:
        result = normalize({"browser": "chrome"})
        assert set(result) == {"browser"}
        assert "spec" not in result
        assert "record" not in result

    def test_empty_input(self) -> None:
        assert normalize({}) == {}

    def test_falsy_values_are_preserved(self) -> None:
        parsed: dict[str, Any] = {"record": False, "detached": False, "env": ""}
        assert normalize(parsed) == parsed

    def test_values_are_not_validated(self) -> None:
        assert normalize({"port": "not-a-port"}) == {"port": "not-a-port"}

    def test_input_is_not_mutated(self) -> None:
        parsed = {"spec": "a.test.js", "extra": 1}
        normalize(parsed)
        assert parsed == {"spec": "a.test.js", "extra": 1}

    def test_every_allowed_key_survives(self) -> None:
        parsed = {key: f"value-{key}" for key in ALLOWED_KEYS}
        parsed["unexpected"] = "x"
        result = normalize(parsed)
        assert set(result) == ALLOWED_KEYS
