"""
Module: message.py
Description: Boundary models for SQS responses.

Every field the service may omit is Optional here, and each model
exposes one accessor that unwraps it to the value callers see.
Responses are parsed from the raw boto3 dictionaries, so missing
keys and explicit nulls look the same to the client.

Key Components:
- SendResult: send_message response (message id)
- ReceivedMessage: one received entry (body + receipt handle)
- ReceiveResult: receive_message response (list of entries)
- DeleteResult: delete_message response (diagnostic payload)

Dependencies: pydantic, typing
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Transport envelope boto3 adds to every response
_RESPONSE_METADATA_KEY = "ResponseMetadata"


class _SQSResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SendResult(_SQSResponse):
    """Result of a send_message call."""

    message_id: Optional[str] = Field(default=None, alias="MessageId")

    @property
    def message_id_or_empty(self) -> str:
        """Message id, or an empty string when the service returned none."""
        return self.message_id or ""


class ReceivedMessage(_SQSResponse):
    """
    A single delivery returned by receive_message.

    Attributes:
        message_id: Service-assigned message id (informational only)
        body: Message body, None if the service omitted it
        receipt_handle: Token needed to delete this delivery, None if omitted
    """

    message_id: Optional[str] = Field(default=None, alias="MessageId")
    body: Optional[str] = Field(default=None, alias="Body")
    receipt_handle: Optional[str] = Field(default=None, alias="ReceiptHandle")


class ReceiveResult(_SQSResponse):
    """Result of a receive_message call."""

    messages: Optional[List[ReceivedMessage]] = Field(default=None, alias="Messages")

    @property
    def entries(self) -> List[ReceivedMessage]:
        """Received entries in service order; empty when none were returned."""
        return self.messages or []


class DeleteResult(BaseModel):
    """
    Result of a delete_message call.

    SQS returns no content on success; whatever is left after removing
    the transport envelope is kept as a diagnostic payload.
    """

    payload: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, response: Optional[Dict[str, Any]]) -> "DeleteResult":
        if not response:
            return cls()
        return cls(payload={
            k: v for k, v in response.items() if k != _RESPONSE_METADATA_KEY
        })

    @property
    def text(self) -> str:
        """Text form of the payload; empty string on a clean success."""
        if not self.payload:
            return ""
        return str(self.payload)
