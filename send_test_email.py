#!/usr/bin/env python3
"""Send one real email through Mailjet using credentials from the environment."""

from mailjet_mailer.config import mailjet_config_from_env
from mailjet_mailer.providers import ApiError, ConfigurationError, Email, MailjetAdapter

print("🧪 Testing Mailjet Email Send")
print("=" * 60)

config = mailjet_config_from_env()
print(f"Base URI: {config['base_uri']}")
print()

adapter = MailjetAdapter()
print(f"Using Provider: {adapter.get_provider_name()}")
print()

from_email = input("Enter the verified sender address: ").strip()
test_email = input("Enter your email address to test: ").strip()

if from_email and test_email:
    print(f"\nSending test email to {test_email}...")

    email = Email(
        from_=('Mailjet Mailer', from_email),
        to=[test_email],
        subject='Test Email from mailjet-mailer',
        text_body='Hello! This is a test email sent via the Mailjet adapter.'
    )

    print()
    try:
        response = adapter.deliver(email, config)
        print("✅ Email sent successfully!")
        print(f"   Status: {response.status_code}")
    except ConfigurationError as e:
        print(f"❌ Configuration problem: {e}")
    except ApiError as e:
        print(f"❌ Email failed: {e}")
else:
    print("No addresses provided. Skipping test.")
