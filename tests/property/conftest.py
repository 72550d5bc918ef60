"""Hypothesis settings for the listing and quoting properties.

Set HYPOTHESIS_PROFILE=ci for a deterministic, deadline-free run.
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("ci", max_examples=100, deadline=None, derandomize=True)

if os.environ.get("HYPOTHESIS_PROFILE") == "ci":
    settings.load_profile("ci")


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/property with the 'property' marker."""
    for item in items:
        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
