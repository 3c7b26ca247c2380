"""
Module: responses.py
Description: Response shaping shared by the sync and async clients.

Turns raw boto3 response dictionaries into the plain values the
client returns, raising the client's own errors for responses that
cannot be shaped.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqsc.models.message import DeleteResult, ReceiveResult, SendResult
from sqsc.sqs_queue.errors import (
    MissingBodyError,
    MissingReceiptHandleError,
    NilResponseError,
    QueueUrlResolutionError,
    ReceiptHandleMismatchError,
)


def queue_url_from(response: Optional[Dict[str, Any]], queue_name: str) -> str:
    """Extract QueueUrl from a get_queue_url response."""
    url = (response or {}).get("QueueUrl")
    if not url:
        raise QueueUrlResolutionError(queue_name)
    return url


def lookup_kwargs(queue_name: str, account_id: str) -> Dict[str, str]:
    """get_queue_url arguments; the owner account is sent only when set."""
    kwargs = {"QueueName": queue_name}
    if account_id:
        kwargs["QueueOwnerAWSAccountId"] = account_id
    return kwargs


def message_id_from(response: Optional[Dict[str, Any]]) -> str:
    """Message id from a send_message response, or empty string."""
    if response is None:
        return ""
    return SendResult.model_validate(response).message_id_or_empty


def bodies_and_handles_from(response: Optional[Dict[str, Any]]) -> Tuple[List[str], List[str]]:
    """
    Split a receive_message response into aligned bodies and handles.

    Stops at the first entry missing a body or receipt handle. An entry's
    body is collected before its handle is checked, so a missing handle
    leaves one more body than handles on the raised error.

    Raises:
        NilResponseError: If response is None
        MissingBodyError: If an entry has no body
        MissingReceiptHandleError: If an entry has no receipt handle
    """
    if response is None:
        raise NilResponseError()

    bodies: List[str] = []
    receipt_handles: List[str] = []

    for entry in ReceiveResult.model_validate(response).entries:
        if entry.body is None:
            raise MissingBodyError(bodies, receipt_handles)
        bodies.append(entry.body)

        if entry.receipt_handle is None:
            raise MissingReceiptHandleError(bodies, receipt_handles)
        receipt_handles.append(entry.receipt_handle)

    return bodies, receipt_handles


def first_of(bodies: List[str], receipt_handles: List[str]) -> Tuple[str, str]:
    """
    Collapse a single-message receive into scalar values.

    Raises:
        ReceiptHandleMismatchError: If the two lists differ in length
    """
    body = bodies[0] if bodies else ""
    receipt_handle = receipt_handles[0] if receipt_handles else ""

    if len(bodies) != len(receipt_handles):
        raise ReceiptHandleMismatchError(
            len(bodies), len(receipt_handles), body, receipt_handle
        )

    return body, receipt_handle


def delete_text_from(response: Optional[Dict[str, Any]]) -> str:
    """Text form of a delete_message response; empty on clean success."""
    return DeleteResult.from_response(response).text
