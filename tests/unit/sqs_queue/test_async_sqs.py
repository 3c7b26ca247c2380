"""
Module: test_async_sqs.py
Description: Unit tests for the async queue client.

Drives AsyncQueueClient with an AsyncMock SQS client handed out by a
MagicMock aioboto3 session.
"""

import asyncio

import pytest
from botocore.exceptions import ClientError

from sqsc.sqs_queue.async_sqs import AsyncQueueClient
from sqsc.sqs_queue.errors import (
    MissingReceiptHandleError,
    NilResponseError,
    QueueClientError,
    QueueUrlResolutionError,
)

TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/test-queue"


class TestAsyncQueueClient:
    """Test cases for AsyncQueueClient operations."""

    @pytest.mark.asyncio
    async def test_create_with_explicit_url(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs

        client = await AsyncQueueClient.create(test_settings, session=session)

        assert client.queue_url == TEST_QUEUE_URL
        sqs.get_queue_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_resolves_by_name(self, settings_factory, mock_async_sqs):
        session, sqs = mock_async_sqs
        settings = settings_factory(queue_url="", queue_name="jobs")

        client = await AsyncQueueClient.create(settings, session=session)

        assert client.queue_url == TEST_QUEUE_URL
        sqs.get_queue_url.assert_awaited_once_with(QueueName="jobs")

    @pytest.mark.asyncio
    async def test_create_fails_without_url(self, settings_factory, mock_async_sqs):
        session, sqs = mock_async_sqs
        sqs.get_queue_url.return_value = {}
        settings = settings_factory(queue_url="", queue_name="jobs")

        with pytest.raises(QueueUrlResolutionError):
            await AsyncQueueClient.create(settings, session=session)

    @pytest.mark.asyncio
    async def test_concurrent_resolve_looks_up_once(self, settings_factory, mock_async_sqs):
        session, sqs = mock_async_sqs

        async def slow_lookup(**kwargs):
            await asyncio.sleep(0)
            return {"QueueUrl": TEST_QUEUE_URL}

        sqs.get_queue_url.side_effect = slow_lookup
        client = AsyncQueueClient(
            settings_factory(queue_url="", queue_name="jobs"), session=session
        )

        urls = await asyncio.gather(client.resolve(), client.resolve(), client.resolve())

        assert urls == [TEST_QUEUE_URL] * 3
        sqs.get_queue_url.assert_awaited_once_with(QueueName="jobs")

    @pytest.mark.asyncio
    async def test_resolve_again_skips_lookup(self, settings_factory, mock_async_sqs):
        session, sqs = mock_async_sqs
        client = await AsyncQueueClient.create(
            settings_factory(queue_url="", queue_name="jobs"), session=session
        )

        assert await client.resolve() == TEST_QUEUE_URL
        sqs.get_queue_url.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_operations_require_resolved_url(self, settings_factory, mock_async_sqs):
        session, _ = mock_async_sqs
        client = AsyncQueueClient(
            settings_factory(queue_url="", queue_name="jobs"), session=session
        )

        with pytest.raises(QueueClientError, match="queue url not resolved"):
            await client.produce("hello")

    @pytest.mark.asyncio
    async def test_produce(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        client = await AsyncQueueClient.create(test_settings, session=session)

        message_id = await client.produce("hello", 3)

        assert message_id == "msg-1"
        sqs.send_message.assert_awaited_once_with(
            QueueUrl=TEST_QUEUE_URL,
            MessageBody="hello",
            DelaySeconds=3
        )

    @pytest.mark.asyncio
    async def test_receive_and_consume(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        sqs.receive_message.return_value = {
            "Messages": [{"Body": "hello", "ReceiptHandle": "rh-1"}]
        }
        client = await AsyncQueueClient.create(test_settings, session=session)

        assert await client.receive(5) == (["hello"], ["rh-1"])
        assert await client.consume() == ("hello", "rh-1")
        assert sqs.receive_message.await_args.kwargs["MaxNumberOfMessages"] == 1

    @pytest.mark.asyncio
    async def test_receive_nil_response(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        sqs.receive_message.return_value = None
        client = await AsyncQueueClient.create(test_settings, session=session)

        with pytest.raises(NilResponseError):
            await client.receive(1)

    @pytest.mark.asyncio
    async def test_receive_missing_receipt_handle(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        sqs.receive_message.return_value = {"Messages": [{"Body": "hello"}]}
        client = await AsyncQueueClient.create(test_settings, session=session)

        with pytest.raises(MissingReceiptHandleError) as exc_info:
            await client.receive(1)

        assert exc_info.value.bodies == ["hello"]
        assert exc_info.value.receipt_handles == []

    @pytest.mark.asyncio
    async def test_delete(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        client = await AsyncQueueClient.create(test_settings, session=session)

        assert await client.delete("rh-1") == ""
        sqs.delete_message.assert_awaited_once_with(
            QueueUrl=TEST_QUEUE_URL,
            ReceiptHandle="rh-1"
        )

    @pytest.mark.asyncio
    async def test_delete_error_propagates(self, test_settings, mock_async_sqs):
        session, sqs = mock_async_sqs
        sqs.delete_message.side_effect = ClientError(
            error_response={'Error': {'Code': 'ReceiptHandleIsInvalid', 'Message': 'Test error'}},
            operation_name='DeleteMessage'
        )
        client = await AsyncQueueClient.create(test_settings, session=session)

        with pytest.raises(ClientError):
            await client.delete("stale")
