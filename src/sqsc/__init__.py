"""
Package: sqsc
Description: Thin client for a single SQS queue.

Exports the queue clients and their settings for convenient importing:

    >>> from sqsc import QueueClient, QueueSettings
"""

from .config import QueueSettings
from .sqs_queue import AsyncQueueClient, QueueClient

__version__ = "0.1.0"

__all__ = [
    "AsyncQueueClient",
    "QueueClient",
    "QueueSettings",
]
