import json
from unittest.mock import Mock, patch

import pytest
import requests

from recordgen.utils import (
    JSONLoaderError,
    load_json,
    load_json_from_file,
    load_json_from_text,
    load_json_from_url,
)


def test_load_from_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"A": []}), encoding="utf-8")

    source, data = load_json_from_file(path)

    assert source == str(path)
    assert data == {"A": []}


def test_load_from_missing_file(tmp_path):
    with pytest.raises(JSONLoaderError, match="File not found"):
        load_json_from_file(tmp_path / "missing.json")


def test_load_invalid_json_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(JSONLoaderError, match="Invalid JSON"):
        load_json_from_file(path)


def test_load_from_text():
    assert load_json_from_text('{"a": 1}') == ("<stdin>", {"a": 1})
    with pytest.raises(JSONLoaderError):
        load_json_from_text("nope")


def test_load_from_url():
    response = Mock()
    response.headers = {"content-type": "application/json"}
    response.json.return_value = {"mappings": []}

    with patch("recordgen.utils.requests.get", return_value=response) as get:
        source, data = load_json_from_url("https://example.com/rules")

    get.assert_called_once_with("https://example.com/rules", timeout=30)
    assert source == "https://example.com/rules"
    assert data == {"mappings": []}


def test_load_from_url_errors():
    with pytest.raises(JSONLoaderError, match="Invalid URL"):
        load_json_from_url("not-a-url")

    with patch(
        "recordgen.utils.requests.get", side_effect=requests.exceptions.Timeout()
    ):
        with pytest.raises(JSONLoaderError, match="timeout"):
            load_json_from_url("https://example.com/rules.json")

    response = Mock()
    response.headers = {}
    response.json.side_effect = ValueError("bad json")
    with patch("recordgen.utils.requests.get", return_value=response):
        with pytest.raises(JSONLoaderError, match="Invalid JSON response"):
            load_json_from_url("https://example.com/rules.json")


def test_load_json_requires_one_source(tmp_path):
    with pytest.raises(JSONLoaderError):
        load_json()
    with pytest.raises(JSONLoaderError):
        load_json(file_path=tmp_path / "a.json", url="https://example.com")
