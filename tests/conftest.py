"""Pytest configuration for the cssutil test suite.

Hypothesis profiles:
- dev: local development, 500 examples
- ci: 50 examples, derandomized

Profile selection: HYPOTHESIS_PROFILE env var, else "ci" when CI=true, else "dev".
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def parse_errors() -> list[None]:
    """Collect parse errors reported through the `parser_error` hook instead of printing them."""
    return []


@pytest.fixture
def collect_parse_error(parse_errors: list[None]):
    def parser_error() -> None:
        parse_errors.append(None)

    return parser_error
