"""HTTP adapters - Remote registration endpoint client."""

from .client import HttpRegistrationClient

__all__ = ["HttpRegistrationClient"]
