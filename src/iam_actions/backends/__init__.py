"""Adapters for the remote service reference and the interactive selector."""

from .client import ServiceReferenceClient
from .fzf import FzfSelector
from .selector_protocol import FuzzySelectorProtocol

__all__ = ["FuzzySelectorProtocol", "FzfSelector", "ServiceReferenceClient"]
