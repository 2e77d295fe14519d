"""Domain value objects."""

from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite

__all__ = ["CallSite", "UNKNOWN_CALL_SITE"]
