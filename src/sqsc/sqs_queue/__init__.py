"""
Package: sqs_queue
Description: SQS queue client.

Provides sync and async clients for producing, consuming and
deleting messages on a single SQS queue.
"""

from .async_sqs import AsyncQueueClient
from .credentials import Anonymous, StaticCredentials, resolve_identity
from .errors import (
    MalformedMessageError,
    MissingBodyError,
    MissingReceiptHandleError,
    NilResponseError,
    QueueClientError,
    QueueUrlResolutionError,
    ReceiptHandleMismatchError,
)
from .sqs import QueueClient, QueueService

__all__ = [
    "Anonymous",
    "AsyncQueueClient",
    "MalformedMessageError",
    "MissingBodyError",
    "MissingReceiptHandleError",
    "NilResponseError",
    "QueueClient",
    "QueueClientError",
    "QueueService",
    "QueueUrlResolutionError",
    "ReceiptHandleMismatchError",
    "StaticCredentials",
    "resolve_identity",
]
