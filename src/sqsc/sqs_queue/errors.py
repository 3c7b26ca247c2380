"""
Module: errors.py
Description: Exceptions raised by the queue client itself.

Service and transport failures are not wrapped; botocore's
ClientError and BotoCoreError reach the caller unchanged. The
classes here cover responses the client cannot shape into a result.
"""

from typing import List, Optional


class QueueClientError(Exception):
    """Base class for errors raised by the queue client."""


class QueueUrlResolutionError(QueueClientError):
    """Queue lookup by name returned no URL."""

    def __init__(self, queue_name: str = ""):
        super().__init__("failed to get queue url")
        self.queue_name = queue_name


class NilResponseError(QueueClientError):
    """The service returned no response and raised nothing."""

    def __init__(self):
        super().__init__("received nil response with no error")


class MalformedMessageError(QueueClientError):
    """
    A received entry was missing a required field.

    Processing stops at the first malformed entry. The entries parsed
    before it are kept on the exception.

    Attributes:
        bodies: Bodies collected before the failure
        receipt_handles: Receipt handles collected before the failure
    """

    def __init__(
        self,
        message: str,
        bodies: Optional[List[str]] = None,
        receipt_handles: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.bodies = bodies if bodies is not None else []
        self.receipt_handles = receipt_handles if receipt_handles is not None else []


class MissingBodyError(MalformedMessageError):
    """A received entry had no message body."""

    def __init__(self, bodies=None, receipt_handles=None):
        super().__init__("received nil message body", bodies, receipt_handles)


class MissingReceiptHandleError(MalformedMessageError):
    """A received entry had a body but no receipt handle."""

    def __init__(self, bodies=None, receipt_handles=None):
        super().__init__("received nil receipt handle", bodies, receipt_handles)


class ReceiptHandleMismatchError(QueueClientError):
    """Body and receipt handle counts differ after a single receive."""

    def __init__(self, body_count: int, handle_count: int, body: str = "", receipt_handle: str = ""):
        super().__init__(
            f"body count and receipt handle mismatch: {body_count} != {handle_count}"
        )
        self.body_count = body_count
        self.handle_count = handle_count
        self.body = body
        self.receipt_handle = receipt_handle
