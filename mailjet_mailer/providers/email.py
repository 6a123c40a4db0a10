"""
Email Message Model

Provider-neutral email value consumed by the adapters. Addresses are
normalized on construction, so every address an adapter sees is an
Address with a non-empty email.
"""

import mimetypes
import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union


class InvalidAddressError(ValueError):
    """Address could not be resolved to an email string."""
    pass


@dataclass(frozen=True)
class Address:
    """Single email address with an optional display name."""
    name: Optional[str]
    email: str

    @property
    def has_name(self) -> bool:
        return bool(self.name)


@dataclass
class Attachment:
    """File attached to an email."""
    filename: str
    content_type: str
    data: bytes

    @classmethod
    def from_path(
        cls,
        path: Union[str, os.PathLike],
        filename: Optional[str] = None,
        content_type: Optional[str] = None
    ) -> 'Attachment':
        """
        Read an attachment from disk.

        The filename defaults to the file's basename and the content type
        is guessed from the extension.
        """
        path = os.fspath(path)
        filename = filename or os.path.basename(path)
        if not content_type:
            guessed, _ = mimetypes.guess_type(filename)
            content_type = guessed or 'application/octet-stream'

        with open(path, 'rb') as f:
            data = f.read()

        return cls(filename=filename, content_type=content_type, data=data)


@dataclass
class MailjetOptions:
    """Mailjet-specific send options carried alongside the message."""
    template_id: Optional[str] = None
    template_language: Optional[bool] = None
    vars: Dict[str, str] = field(default_factory=dict)
    custom_id: Optional[str] = None
    event_payload: Optional[str] = None
    monitoring_category: Optional[str] = None


def normalize_address(value: Any) -> Address:
    """
    Resolve one caller-supplied address into an Address.

    Accepts a bare email string, a (name, email) pair, a dict with
    'email' and optional 'name', or an Address.

    Raises:
        InvalidAddressError: If no email can be extracted
    """
    if isinstance(value, Address):
        address = value
    elif isinstance(value, str):
        address = Address(name=None, email=value)
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        address = Address(name=value[0], email=value[1])
    elif isinstance(value, dict) and 'email' in value:
        address = Address(name=value.get('name'), email=value['email'])
    else:
        raise InvalidAddressError(f'Cannot resolve email address from {value!r}')

    if not isinstance(address.email, str) or not address.email:
        raise InvalidAddressError(f'Email address is empty in {value!r}')

    return address


def _is_name_email_pair(value: Any) -> bool:
    """A (name, email) tuple, as opposed to a tuple of two bare emails."""
    if not (isinstance(value, tuple) and len(value) == 2 and isinstance(value[1], str)):
        return False
    name = value[0]
    return name is None or (isinstance(name, str) and '@' not in name)


def normalize_address_list(value: Any) -> List[Address]:
    """Resolve a recipient list; None is empty and a lone address becomes a list."""
    if value is None:
        return []

    if isinstance(value, (str, dict, Address)) or _is_name_email_pair(value):
        return [normalize_address(value)]

    return [normalize_address(item) for item in value]


@dataclass
class Email:
    """Email message handed to an adapter for delivery."""
    from_: Any = None
    to: Any = None
    cc: Any = None
    bcc: Any = None
    subject: Optional[str] = None
    text_body: Optional[str] = None
    html_body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    attachments: List[Attachment] = field(default_factory=list)
    mailjet: MailjetOptions = field(default_factory=MailjetOptions)

    def __post_init__(self):
        normalize_addresses(self)

    def put_header(self, name: str, value: str) -> 'Email':
        self.headers[name] = value
        return self

    def put_attachment(self, attachment: Union[Attachment, str, os.PathLike]) -> 'Email':
        if not isinstance(attachment, Attachment):
            attachment = Attachment.from_path(attachment)
        self.attachments.append(attachment)
        return self

    def recipients(self) -> List[Address]:
        """All recipients in to, cc, bcc order."""
        return [*self.to, *self.cc, *self.bcc]


def normalize_addresses(email: Email) -> Email:
    """Normalize the sender and every recipient list of an email in place."""
    if email.from_ is not None:
        email.from_ = normalize_address(email.from_)
    email.to = normalize_address_list(email.to)
    email.cc = normalize_address_list(email.cc)
    email.bcc = normalize_address_list(email.bcc)
    return email
