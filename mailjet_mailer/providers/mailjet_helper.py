"""
Mailjet Helper

Setters for the Mailjet-specific options of an Email. Each returns the
email so calls can be chained.
"""

from mailjet_mailer.providers.email import Email


def template(email: Email, template_id: str) -> Email:
    """Send using a Mailjet template."""
    email.mailjet.template_id = template_id
    return email


def template_language(email: Email, enabled: bool) -> Email:
    """Turn Mailjet's template language on or off."""
    email.mailjet.template_language = enabled
    return email


def put_var(email: Email, key: str, value: str) -> Email:
    """Add a template variable."""
    email.mailjet.vars[key] = value
    return email


def put_custom_id(email: Email, custom_id: str) -> Email:
    email.mailjet.custom_id = custom_id
    return email


def put_event_payload(email: Email, payload: str) -> Email:
    email.mailjet.event_payload = payload
    return email


def put_monitoring_category(email: Email, category: str) -> Email:
    email.mailjet.monitoring_category = category
    return email
