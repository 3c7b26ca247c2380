"""
Module: conftest.py
Description: Shared pytest fixtures for queue client tests.

Provides settings, stand-in SQS services and a moto-backed queue.
Uses moto for AWS service mocking so round trips run in-process.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import boto3
import pytest
from moto import mock_aws

from sqsc.config.settings import QueueSettings

TEST_REGION = "us-east-1"
TEST_QUEUE_NAME = "test-queue"
TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/test-queue"


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep SQSC_ variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("SQSC_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def settings_factory():
    """
    Build QueueSettings with test defaults.

    Keyword arguments override the defaults; .env loading is disabled.
    """
    def _make(**overrides):
        values = {
            "region": TEST_REGION,
            "queue_url": TEST_QUEUE_URL,
            "max_retries": 0,
            "visibility_timeout": 30,
            "wait_time_seconds": 0,
        }
        values.update(overrides)
        return QueueSettings(_env_file=None, **values)

    return _make


@pytest.fixture
def test_settings(settings_factory):
    """Settings with an explicit queue URL and static credentials."""
    return settings_factory(access_key="testing", secret_key="testing")


@pytest.fixture
def mock_service():
    """
    Stand-in for the boto3 SQS client.

    Default responses look like healthy, empty SQS replies.
    """
    service = MagicMock()
    service.get_queue_url.return_value = {"QueueUrl": TEST_QUEUE_URL}
    service.send_message.return_value = {"MessageId": "msg-1"}
    service.receive_message.return_value = {}
    service.delete_message.return_value = {
        "ResponseMetadata": {"HTTPStatusCode": 200}
    }
    return service


@pytest.fixture
def mock_async_sqs():
    """AsyncMock SQS client plus an aioboto3-style session that yields it."""
    sqs = AsyncMock()
    sqs.get_queue_url.return_value = {"QueueUrl": TEST_QUEUE_URL}
    sqs.send_message.return_value = {"MessageId": "msg-1"}
    sqs.receive_message.return_value = {}
    sqs.delete_message.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}

    session = MagicMock()
    session.client.return_value.__aenter__.return_value = sqs
    session.client.return_value.__aexit__.return_value = False
    return session, sqs


@pytest.fixture
def moto_queue():
    """
    Create a mock SQS queue.

    Yields the queue URL while moto's mock is active.
    """
    with mock_aws():
        sqs = boto3.client("sqs", region_name=TEST_REGION)
        response = sqs.create_queue(QueueName=TEST_QUEUE_NAME)
        yield response["QueueUrl"]
