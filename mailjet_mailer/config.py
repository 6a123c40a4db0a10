import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from ENV_FILE if specified, or .env.local, or .env
env_file = os.getenv('ENV_FILE')
if env_file:
    load_dotenv(Path(env_file))
else:
    # Try .env.local first, then fall back to .env
    env_local = Path.cwd() / '.env.local'
    if env_local.exists():
        load_dotenv(env_local)
    else:
        load_dotenv()


def _number_from_env(key: str, fallback: int) -> int:
    """Extract integer from environment variable with fallback."""
    raw = os.getenv(key)
    if raw is None:
        return fallback

    try:
        return int(raw)
    except ValueError:
        return fallback


DEFAULT_MAILJET_BASE_URI = 'https://api.mailjet.com/v3'

# Mailjet credentials
MAILJET_API_KEY = os.getenv('MAILJET_API_KEY')
MAILJET_API_PRIVATE_KEY = os.getenv('MAILJET_API_PRIVATE_KEY')

# Override mainly used to point the adapter at a fake server
MAILJET_BASE_URI = os.getenv('MAILJET_BASE_URI', DEFAULT_MAILJET_BASE_URI)

MAILJET_TIMEOUT_SECONDS = _number_from_env('MAILJET_TIMEOUT_SECONDS', 30)


def mailjet_config_from_env() -> dict:
    """Build the adapter config dict from environment settings."""
    return {
        'api_key': MAILJET_API_KEY,
        'api_private_key': MAILJET_API_PRIVATE_KEY,
        'base_uri': MAILJET_BASE_URI
    }
