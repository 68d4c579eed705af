"""Test stem generation."""

from .template import TEST_TEMPLATE, create_test_template

__all__ = [
    "TEST_TEMPLATE",
    "create_test_template",
]
