"""
Email Adapter Pattern - Interface and Response Types

This module defines the contract (interface) that email providers implement,
plus the error types shared by the adapters.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from dataclasses import dataclass

from mailjet_mailer.providers.email import Email


@dataclass
class EmailResponse:
    """Standard response format from email providers."""
    success: bool
    status_code: Optional[int] = None
    raw_response: Optional[Any] = None


class MailjetError(Exception):
    """Base exception for Mailjet adapter errors."""
    pass


class ConfigurationError(MailjetError, ValueError):
    """Required adapter configuration is missing or empty."""
    pass


class ApiError(MailjetError):
    """Mailjet answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f'Mailjet API returned status {status_code}. Response body: {body}'
        )


class EmailAdapter(ABC):
    """
    Abstract base class (interface) for email providers.

    Any email provider implementation must extend this class
    and implement the send_email method.
    """

    @abstractmethod
    def send_email(self, message: Email, config: Dict[str, Any]) -> EmailResponse:
        """
        Send an email using the provider's API.

        Args:
            message: Email to deliver
            config: Provider-specific configuration (API keys, etc.)

        Returns:
            EmailResponse for a successful send

        Raises:
            ConfigurationError: If required configuration is missing
            ApiError: If the provider rejects the request
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of this email provider."""
        pass
