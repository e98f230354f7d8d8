"""Integration tests for the json-equivalence pytest plugin.

These tests verify that the assert_json_equivalent fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-equivalence to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_equivalence import DocumentCache, EquivalenceError


def test_fixture_passes_equivalent_docs(assert_json_equivalent: Any) -> None:
    assert_json_equivalent('{"id": 1, "extra": true}', '{"id": 1}')


def test_fixture_fails_with_equivalence_error(assert_json_equivalent: Any) -> None:
    with pytest.raises(EquivalenceError, match=r"key 'id' was not found"):
        assert_json_equivalent("{}", '{"id": 1}')


def test_fixture_failure_is_assertion_error(assert_json_equivalent: Any) -> None:
    with pytest.raises(AssertionError):
        assert_json_equivalent("[1]", "[2]")


def test_fixture_uses_session_cache(
    assert_json_equivalent: Any, json_document_cache: DocumentCache
) -> None:
    before = json_document_cache.curr_size
    assert_json_equivalent('{"cached": "actual"}', '{"cached": "actual"}')
    assert json_document_cache.curr_size == before + 1


def test_fixture_returns_callable(assert_json_equivalent: Any) -> None:
    assert callable(assert_json_equivalent), (
        "assert_json_equivalent fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_equivalent appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_equivalent" in result.stdout, (
        f"assert_json_equivalent not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
