"""Shared fixtures for betacode2 tests."""

from functools import partial

import pytest

from betacode2 import Dialect, to_greek


@pytest.fixture
def default():
    """Convert with the Robinson-Pierpont (default) dialect."""
    return partial(to_greek, dialect=Dialect.DEFAULT)


@pytest.fixture
def tlg():
    """Convert with the TLG dialect."""
    return partial(to_greek, dialect=Dialect.TLG)


@pytest.fixture(params=list(Dialect), ids=lambda d: d.name.lower())
def dialect(request) -> Dialect:
    """Each supported dialect in turn."""
    return request.param
