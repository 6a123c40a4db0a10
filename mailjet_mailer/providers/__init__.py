from mailjet_mailer.providers.email import (
    Address,
    Attachment,
    Email,
    InvalidAddressError,
    MailjetOptions,
    normalize_addresses
)
from mailjet_mailer.providers.email_adapter import (
    ApiError,
    ConfigurationError,
    EmailAdapter,
    EmailResponse,
    MailjetError
)
from mailjet_mailer.providers.mailjet_adapter import MailjetAdapter
