"""
Pytest configuration for fixtureplan tests.

Provides a factory for ordered participant lists.
"""

import string

import pytest


@pytest.fixture
def participants():
    """Factory for participant lists.

    ``participants(5)`` gives ``[1, 2, 3, 4, 5]``,
    ``participants(3, letters=True)`` gives ``["A", "B", "C"]``.
    """

    def make(count, letters=False):
        if letters:
            return list(string.ascii_uppercase[:count])
        return list(range(1, count + 1))

    return make
