"""
Package: config
Description: Settings for the queue client.
"""

from .settings import QueueSettings

__all__ = ["QueueSettings"]
