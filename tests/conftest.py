"""Global pytest configuration for CHECKEDOPS.

Loads the hypothesis profile named by ``HYPOTHESIS_PROFILE`` (``dev`` by
default) and marks every test with the name of its top-level folder.
"""

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "e2e")

settings.register_profile(
    "ci", max_examples=500, suppress_health_check=[HealthCheck.too_slow]
)
settings.register_profile("dev", max_examples=100)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Add a `unit` or `e2e` mark to items according to their folder."""
    for item in items:
        parts = item.path.resolve().relative_to(TESTS_ROOT).parts
        if len(parts) < 2 or (name := parts[0]) not in FOLDER_MARKERS:
            continue
        if not any(marker.name == name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, name))
