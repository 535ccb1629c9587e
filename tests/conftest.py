"""Shared test fixtures for the listiller test suite."""

from __future__ import annotations

import pytest
from support import Host, RowComponent

from listiller.config import ListillerConfig
from listiller.engine import Listiller


@pytest.fixture
def config() -> ListillerConfig:
    """Default test configuration."""
    return ListillerConfig()


@pytest.fixture
def engine(config: ListillerConfig) -> Listiller:
    """Engine using the default test config."""
    return Listiller(config)


@pytest.fixture
def rows() -> RowComponent:
    """Listilled source over ``{"rows": [(key, value), ...]}`` states."""
    return RowComponent()


@pytest.fixture
def host(config: ListillerConfig) -> Host:
    """Simulated UI host with an empty container."""
    return Host(config)
