"""
Module: settings.py
Description: Queue client configuration using pydantic-settings.

Loads the queue client settings from keyword arguments or
SQSC_-prefixed environment variables, with validation. Supports
.env files for local development.
"""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueueSettings(BaseSettings):
    """Queue client settings loaded from arguments or environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQSC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Identity
    account_id: str = Field(
        default="",
        description="AWS account id owning the queue, used for name lookup"
    )
    access_key: str = Field(
        default="",
        description="AWS access key id - leave blank for no auth"
    )
    secret_key: str = Field(
        default="",
        description="AWS secret access key - leave blank for no auth"
    )

    # Transport
    region: str = Field(..., min_length=1, description="AWS region")
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Override for the SQS endpoint (local stand-ins)"
    )
    max_retries: int = Field(..., ge=0, description="Transport retry budget")

    # Queue
    queue_name: str = Field(
        default="",
        description="Queue name - not needed if queue_url provided"
    )
    queue_url: str = Field(
        default="",
        description="Queue URL - not needed if queue_name provided"
    )
    visibility_timeout: int = Field(
        ...,
        ge=0,
        description="Visibility timeout in seconds for received messages"
    )
    wait_time_seconds: int = Field(
        ...,
        ge=0,
        description="Long poll wait time in seconds for receive calls"
    )

    @field_validator('endpoint_url')
    @classmethod
    def blank_endpoint_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty endpoint override as no override."""
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode='after')
    def require_queue_reference(self) -> "QueueSettings":
        """Either a queue name or a queue URL must be given."""
        if not self.queue_name and not self.queue_url:
            raise ValueError("either queue_name or queue_url must be provided")
        return self
