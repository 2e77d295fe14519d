"""Application layer: chain construction."""

from errtrace.application.chain_factory import ErrorChainFactory

__all__ = ["ErrorChainFactory"]
