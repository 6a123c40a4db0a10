from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest

SUPPORT_DIR = Path(__file__).parent / 'support'

BASE_URI = 'http://localhost:4000'


@pytest.fixture
def config():
    return {'api_key': '123_abc', 'api_private_key': '321_cba', 'base_uri': BASE_URI}


@pytest.fixture
def attachment_path():
    return SUPPORT_DIR / 'attachment.txt'


@pytest.fixture
def fake_session():
    """Session stand-in that accepts every send like Mailjet would."""
    session = MagicMock()
    session.post.return_value = Mock(status_code=200, text='SENT')
    return session


@pytest.fixture
def sent_request():
    """Return (url, json body, headers) of the single POST made on a session."""
    def _sent_request(session):
        session.post.assert_called_once()
        call = session.post.call_args
        return call.args[0], call.kwargs["json"], call.kwargs["headers"]
    return _sent_request
