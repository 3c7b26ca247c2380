"""
Module: async_sqs.py
Description: Async SQS queue client built on aioboto3.

Same contract as QueueClient, for callers running inside an event
loop. The aioboto3 session is created at construction and an SQS
client is opened from it for each call. The queue URL lookup needs
a round trip, so it happens in resolve() rather than __init__.
"""

import asyncio
from typing import List, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from sqsc.config.settings import QueueSettings
from sqsc.sqs_queue.credentials import build_async_session, client_kwargs, resolve_identity
from sqsc.sqs_queue.errors import QueueClientError
from sqsc.sqs_queue.responses import (
    bodies_and_handles_from,
    delete_text_from,
    first_of,
    lookup_kwargs,
    message_id_from,
    queue_url_from,
)
from sqsc.sqs_queue.sqs import log_service_error
from sqsc.utils.logger import get_logger

logger = get_logger(__name__)


class AsyncQueueClient:
    """
    Async SQS client bound to a single queue.

    Example:
        >>> client = await AsyncQueueClient.create(settings)
        >>> message_id = await client.produce("hello")
        >>> body, receipt_handle = await client.consume()
        >>> await client.delete(receipt_handle)
        ''
    """

    def __init__(self, settings: QueueSettings, session=None):
        """
        Initialize the async queue client.

        Args:
            settings: Queue settings
            session: aioboto3 Session; built from settings when omitted

        Raises:
            ValueError: If settings is not a QueueSettings instance
        """
        if not isinstance(settings, QueueSettings):
            raise ValueError("settings must be a QueueSettings instance")

        self._identity = resolve_identity(settings.access_key, settings.secret_key)
        self._client_kwargs = client_kwargs(settings, self._identity)
        self.session = session if session is not None else build_async_session(
            settings, self._identity
        )
        self.settings = settings
        self._resolve_lock: Optional[asyncio.Lock] = None

    @classmethod
    async def create(cls, settings: QueueSettings, session=None) -> "AsyncQueueClient":
        """Construct a client and resolve its queue URL."""
        client = cls(settings, session=session)
        await client.resolve()
        return client

    def _client(self):
        return self.session.client("sqs", **self._client_kwargs)

    @property
    def queue_url(self) -> str:
        if not self.settings.queue_url:
            raise QueueClientError("queue url not resolved; await resolve() first")
        return self.settings.queue_url

    async def resolve(self) -> str:
        """
        Resolve the queue URL by name if it was not configured.

        Concurrent callers share a single lookup; later calls return the
        resolved URL without a round trip.

        Returns:
            The queue URL

        Raises:
            QueueUrlResolutionError: If the lookup returned no URL
            ClientError: If the lookup failed
        """
        if not self.settings.queue_url:
            if self._resolve_lock is None:
                self._resolve_lock = asyncio.Lock()

            async with self._resolve_lock:
                # another caller may have finished the lookup while we waited
                if not self.settings.queue_url:
                    url = await self._lookup_queue_url()
                    self.settings = self.settings.model_copy(update={"queue_url": url})

        logger.info(
            "Async SQS client initialized",
            queue_url=self.settings.queue_url,
            region=self.settings.region,
            identity=type(self._identity).__name__
        )
        return self.settings.queue_url

    async def _lookup_queue_url(self) -> str:
        try:
            async with self._client() as sqs:
                response = await sqs.get_queue_url(
                    **lookup_kwargs(self.settings.queue_name, self.settings.account_id)
                )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to resolve SQS queue url", e,
                queue_name=self.settings.queue_name
            )
            raise

        return queue_url_from(response, self.settings.queue_name)

    async def produce(self, body: str, delay_seconds: int = 0) -> str:
        """Send one message; returns the message id or an empty string."""
        queue_url = self.queue_url
        try:
            async with self._client() as sqs:
                response = await sqs.send_message(
                    QueueUrl=queue_url,
                    MessageBody=body,
                    DelaySeconds=delay_seconds
                )
        except (ClientError, BotoCoreError) as e:
            log_service_error("Failed to send message to SQS", e, queue_url=queue_url)
            raise

        message_id = message_id_from(response)
        logger.info(
            "Message sent to SQS",
            message_id=message_id,
            delay_seconds=delay_seconds,
            queue_url=queue_url
        )
        return message_id

    async def receive(self, n: int) -> Tuple[List[str], List[str]]:
        """Receive up to n messages; see QueueClient.receive for errors."""
        queue_url = self.queue_url
        try:
            async with self._client() as sqs:
                response = await sqs.receive_message(
                    QueueUrl=queue_url,
                    VisibilityTimeout=self.settings.visibility_timeout,
                    WaitTimeSeconds=self.settings.wait_time_seconds,
                    MaxNumberOfMessages=n
                )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to receive messages from SQS", e, queue_url=queue_url
            )
            raise

        bodies, receipt_handles = bodies_and_handles_from(response)
        logger.debug(
            "Received messages from SQS",
            count=len(bodies),
            requested=n,
            queue_url=queue_url
        )
        return bodies, receipt_handles

    async def consume(self) -> Tuple[str, str]:
        """Receive a single message as (body, receipt_handle)."""
        bodies, receipt_handles = await self.receive(1)
        return first_of(bodies, receipt_handles)

    async def delete(self, receipt_handle: str) -> str:
        """Delete a received message; empty string on success."""
        queue_url = self.queue_url
        try:
            async with self._client() as sqs:
                response = await sqs.delete_message(
                    QueueUrl=queue_url,
                    ReceiptHandle=receipt_handle
                )
        except (ClientError, BotoCoreError) as e:
            log_service_error(
                "Failed to delete message from SQS", e, queue_url=queue_url
            )
            raise

        logger.debug("Deleted message from SQS", queue_url=queue_url)
        return delete_text_from(response)
