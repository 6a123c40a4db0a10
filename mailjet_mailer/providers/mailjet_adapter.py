"""
Mailjet Email Adapter Implementation

Concrete implementation of the EmailAdapter for the Mailjet v3 send API.

Request building is pure: handle_config, choose_recipient_encoding and
build_request do no I/O. send() performs the single HTTP POST and turns
a non-2xx answer into an ApiError.
"""

import base64
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Any, List, Optional, Union

import requests

from mailjet_mailer import config as settings
from mailjet_mailer import logger
from mailjet_mailer.providers.email import Address, Attachment, Email
from mailjet_mailer.providers.email_adapter import (
    ApiError,
    ConfigurationError,
    EmailAdapter,
    EmailResponse
)

SEND_MESSAGE_PATH = '/send'

REQUIRED_CONFIG_KEYS = ('api_key', 'api_private_key')


class RecipientEncoding(Enum):
    """How recipients are written into the request body."""
    FLAT = "flat"              # comma-joined to/cc/bcc strings
    STRUCTURED = "structured"  # recipients array of {email, name}


@dataclass(frozen=True)
class MailjetConfig:
    """Validated adapter configuration."""
    api_key: str
    api_private_key: str
    base_uri: str = settings.DEFAULT_MAILJET_BASE_URI


@dataclass
class OutboundRequest:
    """Fully built POST against the send endpoint."""
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]


def handle_config(config: Union[Dict[str, Any], MailjetConfig]) -> MailjetConfig:
    """
    Validate adapter configuration.

    Args:
        config: Dict with 'api_key', 'api_private_key' and optional 'base_uri'

    Returns:
        MailjetConfig with the base URI resolved

    Raises:
        ConfigurationError: If a required key is missing or empty
    """
    if isinstance(config, MailjetConfig):
        config = {
            'api_key': config.api_key,
            'api_private_key': config.api_private_key,
            'base_uri': config.base_uri
        }

    for key in REQUIRED_CONFIG_KEYS:
        if not config.get(key):
            raise ConfigurationError(
                f'no {key} set: supply a non-empty {key} in the Mailjet config'
            )

    base_uri = config.get('base_uri') or settings.MAILJET_BASE_URI

    return MailjetConfig(
        api_key=config['api_key'],
        api_private_key=config['api_private_key'],
        base_uri=base_uri.rstrip('/')
    )


def format_address(value: Union[Address, List[Address]]) -> str:
    """Render an address as 'name <email>' or a list as a comma-joined string."""
    if isinstance(value, Address):
        if value.has_name:
            return f'{value.name} <{value.email}>'
        return value.email

    return ','.join(format_address(address) for address in value)


def choose_recipient_encoding(email: Email) -> RecipientEncoding:
    """
    Decide between flat and structured recipients.

    Named bcc-only recipients cannot go through the flat fields, so they
    switch the whole request to the recipients array. Display names in
    to or cc do not trigger it: those lists render fine as
    "name <email>" strings even when bcc carries names too.
    """
    if not email.to and not email.cc and any(a.has_name for a in email.bcc):
        return RecipientEncoding.STRUCTURED
    return RecipientEncoding.FLAT


def _recipient(address: Address) -> Dict[str, str]:
    recipient = {'email': address.email}
    if address.has_name:
        recipient['name'] = address.name
    return recipient


def _attachment(attachment: Attachment) -> Dict[str, str]:
    return {
        'content-type': attachment.content_type,
        'filename': attachment.filename,
        'content': base64.b64encode(attachment.data).decode('ascii')
    }


def _put_if_present(body: Dict[str, Any], key: str, value: Any):
    if value is not None:
        body[key] = value


def build_body(email: Email, encoding: RecipientEncoding) -> Dict[str, Any]:
    """Map an email onto Mailjet's send API fields."""
    body: Dict[str, Any] = {}

    if email.from_ is not None:
        _put_if_present(body, 'fromname', email.from_.name or None)
        body['fromemail'] = email.from_.email

    _put_if_present(body, 'subject', email.subject)
    _put_if_present(body, 'text-part', email.text_body)
    _put_if_present(body, 'html-part', email.html_body)

    if encoding is RecipientEncoding.STRUCTURED:
        body['recipients'] = [_recipient(a) for a in email.recipients()]
    else:
        for key in ('to', 'cc', 'bcc'):
            addresses = getattr(email, key)
            if addresses:
                body[key] = format_address(addresses)

    options = email.mailjet
    _put_if_present(body, 'mj-templateid', options.template_id)
    _put_if_present(body, 'mj-templatelanguage', options.template_language)
    if options.vars:
        body['vars'] = dict(options.vars)
    _put_if_present(body, 'Mj-CustomID', options.custom_id)
    _put_if_present(body, 'Mj-EventPayLoad', options.event_payload)
    _put_if_present(body, 'Mj-MonitoringCategory', options.monitoring_category)

    if email.attachments:
        body['attachments'] = [_attachment(a) for a in email.attachments]

    return body


def build_headers(email: Email, config: MailjetConfig) -> Dict[str, str]:
    """Basic auth and JSON content type, then the email's custom headers."""
    credentials = f'{config.api_key}:{config.api_private_key}'.encode('utf-8')
    headers = {
        'Authorization': 'Basic ' + base64.b64encode(credentials).decode('ascii'),
        'Content-Type': 'application/json'
    }
    headers.update(email.headers)
    return headers


def build_request(
    email: Email,
    config: Union[Dict[str, Any], MailjetConfig],
    encoding: Optional[RecipientEncoding] = None
) -> OutboundRequest:
    """
    Build the send request for an email without touching the network.

    Args:
        email: Normalized email
        config: Adapter config, validated before anything is built
        encoding: Precomputed recipient encoding, computed here when omitted

    Returns:
        OutboundRequest with url, headers and JSON body
    """
    mailjet_config = handle_config(config)
    if encoding is None:
        encoding = choose_recipient_encoding(email)

    return OutboundRequest(
        url=mailjet_config.base_uri + SEND_MESSAGE_PATH,
        headers=build_headers(email, mailjet_config),
        body=build_body(email, encoding)
    )


def send(request: OutboundRequest, session: Optional[requests.Session] = None) -> EmailResponse:
    """
    POST a built request once and classify the answer.

    Raises:
        ApiError: If the status is outside 200-299
        requests.RequestException: On transport failure, unchanged
    """
    http = session or requests
    response = http.post(
        request.url,
        json=request.body,
        headers=request.headers,
        timeout=settings.MAILJET_TIMEOUT_SECONDS
    )

    if not 200 <= response.status_code < 300:
        raise ApiError(response.status_code, response.text)

    return EmailResponse(
        success=True,
        status_code=response.status_code,
        raw_response=response.text
    )


class MailjetAdapter(EmailAdapter):
    """Mailjet implementation of the EmailAdapter interface."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session

    def get_provider_name(self) -> str:
        return "Mailjet"

    def deliver(self, email: Email, config: Union[Dict[str, Any], MailjetConfig]) -> EmailResponse:
        """
        Send an email via the Mailjet send API.

        Args:
            email: Email to deliver
            config: Must contain 'api_key' and 'api_private_key', optionally 'base_uri'

        Returns:
            EmailResponse with status code and raw body text

        Raises:
            ConfigurationError: Before any request when credentials are missing
            ApiError: When Mailjet answers with a non-2xx status
        """
        mailjet_config = handle_config(config)
        # replace() re-runs __post_init__, normalizing a copy
        email = replace(email)
        encoding = choose_recipient_encoding(email)
        request = build_request(email, mailjet_config, encoding)

        logger.debug(
            'Sending email via Mailjet',
            url=request.url,
            recipients=len(email.recipients()),
            encoding=encoding.value,
            attachments=len(email.attachments)
        )

        try:
            response = send(request, self.session)
        except ApiError as e:
            logger.error(
                'Mailjet rejected email',
                err=e,
                status_code=e.status_code
            )
            raise

        logger.info('Mailjet accepted email', status_code=response.status_code)
        return response

    def send_email(self, message: Email, config: Dict[str, Any]) -> EmailResponse:
        return self.deliver(message, config)
