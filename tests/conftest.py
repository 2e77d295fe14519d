"""Pytest configuration.

This configuration ensures:
1. Every test starts from a clean container (no cached settings or adapters)
2. Library settings come from a known environment
3. Tests can build factories with deterministic call sites
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from errtrace.application.chain_factory import ErrorChainFactory
from errtrace.core.container import reset_container
from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite


class FakeCallSiteCapturer:
    """Capturer returning preset call sites in order.

    Once the preset list is exhausted every capture returns the unknown
    call site. Requested skip depths are recorded in ``skips``.
    """

    def __init__(self, *call_sites: CallSite) -> None:
        self._call_sites = list(call_sites)
        self.skips: list[int] = []

    def capture(self, skip: int = 0) -> CallSite:
        self.skips.append(skip)
        if not self._call_sites:
            return UNKNOWN_CALL_SITE
        return self._call_sites.pop(0)


def make_call_site(n: int) -> CallSite:
    """Deterministic call site number ``n``."""
    return CallSite(file=f"app/module_{n}.py", line=10 * n, function=f"app.module_{n}.func")


@pytest.fixture(autouse=True)
def clean_container():
    """Isolate library settings and cached adapters per test."""
    env = {"ERRTRACE_ENVIRONMENT": "testing", "ERRTRACE_LOG_LEVEL": "WARNING"}
    with patch.dict(os.environ, env, clear=False):
        reset_container()
        yield
    reset_container()


@pytest.fixture
def mock_logger():
    """Mock implementing LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def call_sites():
    """Three deterministic call sites."""
    return [make_call_site(n) for n in (1, 2, 3)]


@pytest.fixture
def capturer(call_sites):
    """Fake capturer preloaded with the deterministic call sites."""
    return FakeCallSiteCapturer(*call_sites)


@pytest.fixture
def factory(capturer, mock_logger):
    """Factory wired with fake capturer and mock logger."""
    return ErrorChainFactory(capturer=capturer, logger=mock_logger)
