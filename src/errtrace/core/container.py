"""Composition root.

Adapter selection lives here and nowhere else. Every getter is cached with
``lru_cache`` so the module-level API reuses one factory per process; call
``reset_container()`` after changing settings.

Usage:
    from errtrace.core.container import get_chain_factory

    factory = get_chain_factory()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from errtrace.core.config import get_settings

if TYPE_CHECKING:
    from errtrace.application.chain_factory import ErrorChainFactory
    from errtrace.domain.protocols import CallSiteCapturerProtocol, LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the library logger singleton.

    - development: StdlibLoggingAdapter (human-readable)
    - testing/ci/production: StdlibLoggingAdapter (JSON)

    Events go to the ``errtrace`` stdlib logger; the host configures handlers.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from errtrace.infrastructure.logging.stdlib_adapter import StdlibLoggingAdapter

    settings = get_settings()
    return StdlibLoggingAdapter(
        use_json=not settings.is_development,
        level=settings.log_level_number,
    )


@lru_cache
def get_call_site_capturer() -> "CallSiteCapturerProtocol":
    """Return the call-site capturer selected by settings.

    Returns:
        CallSiteCapturerProtocol: Frame inspection, or the null capturer when
        ``capture_call_sites`` is disabled.
    """
    from errtrace.infrastructure.call_site import (
        FrameInspectionCapturer,
        NullCallSiteCapturer,
    )

    if get_settings().capture_call_sites:
        return FrameInspectionCapturer()
    return NullCallSiteCapturer()


@lru_cache
def get_chain_factory() -> "ErrorChainFactory":
    """Return the factory used by ``errtrace.new`` and ``errtrace.wrap``.

    Returns:
        ErrorChainFactory: Factory wired with the cached capturer and logger.
    """
    from errtrace.application.chain_factory import ErrorChainFactory

    return ErrorChainFactory(
        capturer=get_call_site_capturer(),
        logger=get_logger(),
    )


def reset_container() -> None:
    """Drop cached settings and adapters so the next call rebuilds them."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_call_site_capturer.cache_clear()
    get_chain_factory.cache_clear()
