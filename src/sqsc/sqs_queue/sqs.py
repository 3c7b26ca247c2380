"""
Module: sqs.py
Description: Synchronous SQS queue client.

Resolves credentials and the queue URL once at construction, then
exposes produce, consume, receive and delete as single round trips
against that queue. Service errors are logged and re-raised as-is;
retries are left to botocore's configured retry budget.
"""

from typing import Any, Dict, List, Optional, Protocol, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from sqsc.config.settings import QueueSettings
from sqsc.sqs_queue.credentials import build_sqs_client, resolve_identity
from sqsc.sqs_queue.responses import (
    bodies_and_handles_from,
    delete_text_from,
    first_of,
    lookup_kwargs,
    message_id_from,
    queue_url_from,
)
from sqsc.utils.logger import get_logger

logger = get_logger(__name__)


class QueueService(Protocol):
    """The slice of the boto3 SQS client the queue client relies on."""

    def get_queue_url(self, **kwargs: Any) -> Dict[str, Any]: ...

    def send_message(self, **kwargs: Any) -> Dict[str, Any]: ...

    def receive_message(self, **kwargs: Any) -> Dict[str, Any]: ...

    def delete_message(self, **kwargs: Any) -> Dict[str, Any]: ...


def log_service_error(message: str, error: Exception, **context: Any) -> None:
    """
    Log a failed SQS call with structured context.

    ClientError carries the service error code and message; any other
    botocore error is logged by its text.

    Args:
        message: Log event name
        error: Exception raised by the SQS call
        **context: Extra key/value pairs (queue_url, queue_name)
    """
    if isinstance(error, ClientError):
        logger.error(
            message,
            error_code=error.response.get('Error', {}).get('Code'),
            error_message=error.response.get('Error', {}).get('Message'),
            **context
        )
    else:
        logger.error(message, error=str(error), **context)


class QueueClient:
    """
    SQS client bound to a single queue.

    Attributes:
        settings: Settings with queue_url resolved
        sqs: Service handle (boto3 SQS client or a QueueService stand-in)

    Example:
        >>> client = QueueClient(QueueSettings(region="us-east-1", queue_name="jobs",
        ...                                    max_retries=3, visibility_timeout=30,
        ...                                    wait_time_seconds=10))
        >>> message_id = client.produce("hello")
        >>> body, receipt_handle = client.consume()
        >>> client.delete(receipt_handle)
        ''
    """

    def __init__(self, settings: QueueSettings, service: Optional[QueueService] = None):
        """
        Initialize the queue client.

        Args:
            settings: Queue settings
            service: Pre-built service handle; built from settings when omitted

        Raises:
            ValueError: If settings is not a QueueSettings instance
            QueueUrlResolutionError: If the queue lookup returned no URL
            ClientError: If the queue lookup failed
        """
        if not isinstance(settings, QueueSettings):
            raise ValueError("settings must be a QueueSettings instance")

        identity = resolve_identity(settings.access_key, settings.secret_key)
        self.sqs = service if service is not None else build_sqs_client(settings, identity)

        if not settings.queue_url:
            settings = settings.model_copy(
                update={"queue_url": self._lookup_queue_url(settings)}
            )

        self.settings = settings

        logger.info(
            "SQS client initialized",
            queue_url=settings.queue_url,
            region=settings.region,
            identity=type(identity).__name__
        )

    def _lookup_queue_url(self, settings: QueueSettings) -> str:
        try:
            response = self.sqs.get_queue_url(
                **lookup_kwargs(settings.queue_name, settings.account_id)
            )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to resolve SQS queue url", e, queue_name=settings.queue_name
            )
            raise

        return queue_url_from(response, settings.queue_name)

    @property
    def queue_url(self) -> str:
        return self.settings.queue_url

    def produce(self, body: str, delay_seconds: int = 0) -> str:
        """
        Send one message to the queue.

        Args:
            body: Message body
            delay_seconds: Delay before the message becomes visible (usually 0)

        Returns:
            Message ID from SQS, or an empty string if none was returned

        Raises:
            ClientError: If the SQS operation fails
        """
        try:
            response = self.sqs.send_message(
                QueueUrl=self.queue_url,
                MessageBody=body,
                DelaySeconds=delay_seconds
            )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to send message to SQS", e, queue_url=self.queue_url
            )
            raise

        message_id = message_id_from(response)
        logger.info(
            "Message sent to SQS",
            message_id=message_id,
            delay_seconds=delay_seconds,
            queue_url=self.queue_url
        )
        return message_id

    def receive(self, n: int) -> Tuple[List[str], List[str]]:
        """
        Receive up to n messages in one call.

        Args:
            n: Maximum number of messages (SQS caps this at 10)

        Returns:
            Tuple of (bodies, receipt_handles), index-aligned

        Raises:
            ClientError: If the SQS operation fails
            NilResponseError: If SQS returned nothing without an error
            MalformedMessageError: If an entry lacks a body or receipt handle;
                carries the entries parsed before it
        """
        try:
            response = self.sqs.receive_message(
                QueueUrl=self.queue_url,
                VisibilityTimeout=self.settings.visibility_timeout,
                WaitTimeSeconds=self.settings.wait_time_seconds,
                MaxNumberOfMessages=n
            )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to receive messages from SQS", e, queue_url=self.queue_url
            )
            raise

        bodies, receipt_handles = bodies_and_handles_from(response)
        logger.debug(
            "Received messages from SQS",
            count=len(bodies),
            requested=n,
            queue_url=self.queue_url
        )
        return bodies, receipt_handles

    def consume(self) -> Tuple[str, str]:
        """
        Receive a single message.

        Returns:
            Tuple of (body, receipt_handle); both empty if no message was available

        Raises:
            Any error from receive(), or ReceiptHandleMismatchError
        """
        bodies, receipt_handles = self.receive(1)
        return first_of(bodies, receipt_handles)

    def delete(self, receipt_handle: str) -> str:
        """
        Delete a received message.

        Args:
            receipt_handle: Receipt handle from consume() or receive()

        Returns:
            Empty string on success; any unexpected response payload as text

        Raises:
            ClientError: If the handle is invalid or expired, or SQS fails
        """
        try:
            response = self.sqs.delete_message(
                QueueUrl=self.queue_url,
                ReceiptHandle=receipt_handle
            )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to delete message from SQS", e, queue_url=self.queue_url
            )
            raise

        logger.debug("Deleted message from SQS", queue_url=self.queue_url)
        return delete_text_from(response)
