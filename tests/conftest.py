"""Pytest configuration for the xsdatetime test suite.

Hypothesis example counts live here and nowhere else:
- dev: 500 examples per property (default for local runs)
- ci: 50 derandomized examples (selected when CI=true)

HYPOTHESIS_PROFILE=dev|ci overrides the detection.

Timing and heavy property tests carry @pytest.mark.fuzz and are skipped
unless the run selects them with: pytest -m fuzz
"""

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture DEBUG records from every xsdatetime logger."""
    with caplog.at_level(logging.DEBUG, logger="xsdatetime"):
        yield caplog


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: heavy property and timing tests (skipped unless -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the -m expression names them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
