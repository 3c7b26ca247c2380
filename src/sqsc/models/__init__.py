"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the response models used at the boundary
with the SQS service:
- SendResult: send_message response
- ReceivedMessage: single received entry
- ReceiveResult: receive_message response
- DeleteResult: delete_message response
"""

from .message import DeleteResult, ReceivedMessage, ReceiveResult, SendResult

__all__ = [
    "DeleteResult",
    "ReceivedMessage",
    "ReceiveResult",
    "SendResult",
]
