import json
import logging
from pathlib import Path

import pytest

from recordgen.codegen.core.schema import (
    ANY,
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    Field,
    Record,
    RecordRef,
    Schema,
)
from recordgen.logging_config import PACKAGE_LOGGER

FIXTURES = Path(__file__).parent / "fixtures"

GOLDEN_FILES = {
    "python": "expected_python.py",
    "go": "expected_go.go",
    "rust": "expected_rust.rs",
    "typescript": "expected_typescript.ts",
    "java": "expected_java.java",
    "kotlin": "expected_kotlin.kt",
    "swift": "expected_swift.swift",
}


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # The CLI installs its own handler and stops propagation
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture()
def dto01_dir() -> Path:
    return FIXTURES / "dto01_basic"


@pytest.fixture()
def dto01_schema() -> Schema:
    user = Record(
        "RecordUser",
        (
            Field("name", ANY, required=False),
            Field("age", INTEGER),
        ),
    )
    record = Record(
        "Record",
        (
            Field("id", STRING),
            Field("user", RecordRef("RecordUser")),
            Field("price", FLOAT, required=False),
            Field("active", BOOLEAN),
            Field("meta", ANY, required=False),
            Field("user-name", ANY, required=False),
            Field("class", ANY, required=False),
            Field("status", STRING),
            Field("source", STRING),
        ),
    )
    return Schema((user, record))


@pytest.fixture()
def dto01_rules(dto01_dir):
    return json.loads((dto01_dir / "rules.json").read_text(encoding="utf-8"))


def load_golden(language: str) -> str:
    return (FIXTURES / "dto01_basic" / GOLDEN_FILES[language]).read_text(
        encoding="utf-8"
    )


@pytest.fixture()
def golden():
    """Return a loader for the expected output of a language."""
    return load_golden
