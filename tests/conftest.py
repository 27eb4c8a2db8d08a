"""Pytest configuration for the cucumberexpr test suite.

Hypothesis profiles:
- dev: 500 examples per property (default)
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE selects a profile explicitly, e.g.
``HYPOTHESIS_PROFILE=verbose pytest tests/``.

Tests marked ``fuzz`` run thousands of arbitrary expressions and are
skipped unless requested with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in _PROFILES:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long property runs over arbitrary input (skipped unless run with -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
