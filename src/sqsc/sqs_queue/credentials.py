"""
Module: credentials.py
Description: Identity selection and boto3 client construction.

The client either signs requests with a static key pair or sends
them unsigned. resolve_identity() makes that choice from settings
alone so it can be tested without touching the network; the build
helpers turn an identity into boto3 / aioboto3 handles.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

import aioboto3
import boto3
from botocore import UNSIGNED
from botocore.config import Config

from sqsc.config.settings import QueueSettings


@dataclass(frozen=True)
class Anonymous:
    """No-auth identity; requests go out unsigned."""


@dataclass(frozen=True)
class StaticCredentials:
    """Static key pair identity."""

    access_key: str
    secret_key: str

    def __repr__(self) -> str:
        return f"StaticCredentials(access_key={self.access_key!r}, secret_key='***')"


Identity = Union[Anonymous, StaticCredentials]


def resolve_identity(access_key: str, secret_key: str) -> Identity:
    """
    Pick the identity for a key pair.

    Static credentials only when both halves are non-empty; any other
    combination falls back to anonymous.
    """
    if access_key and secret_key:
        return StaticCredentials(access_key=access_key, secret_key=secret_key)
    return Anonymous()


def _session_kwargs(settings: QueueSettings, identity: Identity) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"region_name": settings.region}
    if isinstance(identity, StaticCredentials):
        kwargs["aws_access_key_id"] = identity.access_key
        kwargs["aws_secret_access_key"] = identity.secret_key
    return kwargs


def client_kwargs(settings: QueueSettings, identity: Identity) -> Dict[str, Any]:
    """
    Keyword arguments for session.client('sqs', ...).

    Carries the retry budget, the endpoint override and, for anonymous
    identities, unsigned requests.
    """
    config_kwargs: Dict[str, Any] = {
        "retries": {"max_attempts": settings.max_retries, "mode": "standard"},
    }
    if isinstance(identity, Anonymous):
        config_kwargs["signature_version"] = UNSIGNED

    kwargs: Dict[str, Any] = {"config": Config(**config_kwargs)}
    if settings.endpoint_url:
        kwargs["endpoint_url"] = settings.endpoint_url
    return kwargs


def build_sqs_client(settings: QueueSettings, identity: Identity):
    """Build a boto3 SQS client for the given settings and identity."""
    session = boto3.Session(**_session_kwargs(settings, identity))
    return session.client("sqs", **client_kwargs(settings, identity))


def build_async_session(settings: QueueSettings, identity: Identity) -> aioboto3.Session:
    """Build an aioboto3 session; SQS clients are opened from it per call."""
    return aioboto3.Session(**_session_kwargs(settings, identity))
