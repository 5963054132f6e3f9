"""Shared fixtures."""

import pytest

from depcontainer import Container


@pytest.fixture
def container():
    return Container()
