"""Unit tests for the number-systems HTTP transport."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def _client() -> TestClient:
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    from modules.number_systems.tool.app import app

    return TestClient(app)


def test_convert_returns_result_and_steps() -> None:
    """Answer a valid conversion with 200 and the full result shape."""
    response = _client().post(
        "/convert", data={"value": "FF", "from_base": "16", "to_base": "10"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == "255"
    assert body["isValid"] is True
    assert body["errorMessage"] == ""
    assert body["steps"][0] == "Step 1: Convert FF (base 16) to decimal"


def test_convert_accepts_system_names() -> None:
    """Resolve bases given by name."""
    response = _client().post(
        "/convert", data={"value": "1010", "from_base": "binary", "to_base": "hexadecimal"}
    )
    assert response.status_code == 200
    assert response.json()["result"] == "A"


def test_convert_invalid_digit_is_400() -> None:
    """Answer invalid digits with 400 and an invalid result body."""
    response = _client().post(
        "/convert", data={"value": "G", "from_base": "16", "to_base": "10"}
    )
    assert response.status_code == 400
    assert response.json() == {
        "result": "",
        "steps": [],
        "isValid": False,
        "errorMessage": "Invalid digit 'G' for base 16 at position 1.",
    }


@pytest.mark.parametrize(
    ("data", "fragment"),
    [
        ({"value": "1", "from_base": "3", "to_base": "10"}, "Source base 3"),
        ({"value": "1", "from_base": "10", "to_base": "octal-ish"}, "Target base"),
        ({"value": "1", "to_base": "10"}, "Source base is required."),
        ({"from_base": "10", "to_base": "2"}, "Input cannot be empty."),
    ],
)
def test_convert_rejects_bad_fields(data: dict[str, str], fragment: str) -> None:
    """Keep the result shape for missing or unsupported fields."""
    response = _client().post("/convert", data=data)
    assert response.status_code == 400
    body = response.json()
    assert body["isValid"] is False
    assert body["result"] == ""
    assert fragment in body["errorMessage"]


def test_convert_all_fans_out() -> None:
    """Return all four representations of one value."""
    response = _client().post("/convert/all", data={"value": "123", "from_base": "10"})
    assert response.status_code == 200
    assert response.json() == {
        "binary": "1111011",
        "octal": "173",
        "decimal": "123",
        "hexadecimal": "7B",
        "isValid": True,
        "errorMessage": "",
    }


def test_convert_all_invalid_is_400() -> None:
    """Clear every field when the value is invalid."""
    response = _client().post("/convert/all", data={"value": "2", "from_base": "2"})
    assert response.status_code == 400
    body = response.json()
    assert body["isValid"] is False
    assert body["binary"] == body["hexadecimal"] == ""


def test_input_length_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Refuse inputs longer than the configured maximum."""
    monkeypatch.setenv("NUMCONVERTER_MAX_INPUT_LENGTH", "4")
    client = _client()
    response = client.post("/convert", data={"value": "11111", "from_base": "2", "to_base": "10"})
    assert response.status_code == 400
    assert response.json()["errorMessage"] == "Input is longer than 4 characters."

    response = client.post("/convert/all", data={"value": "1111", "from_base": "2"})
    assert response.status_code == 200

    monkeypatch.setenv("NUMCONVERTER_MAX_INPUT_LENGTH", "0")
    response = client.post("/convert", data={"value": "1" * 2000, "from_base": "2", "to_base": "16"})
    assert response.status_code == 200


def test_systems_lists_catalog_and_pairs() -> None:
    """Expose the four systems and the twelve conversion pairs."""
    response = _client().get("/systems")
    assert response.status_code == 200
    body = response.json()
    assert [item["base"] for item in body["systems"]] == [2, 8, 10, 16]
    assert len(body["pairs"]) == 12


def test_long_input_keeps_response_small(monkeypatch: pytest.MonkeyPatch) -> None:
    """Summarize the trace for inputs at the default length limit."""
    monkeypatch.delenv("NUMCONVERTER_MAX_INPUT_LENGTH", raising=False)
    response = _client().post(
        "/convert", data={"value": "F" * 1024, "from_base": "16", "to_base": "2"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == "1" * 4096
    assert len(body["steps"]) == 7
    assert len(response.content) < 20_000
