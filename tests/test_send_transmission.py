import json
import pytest
from unittest.mock import AsyncMock, patch

import send_transmission
from models.responses import TransmissionFailure, TransmissionSuccess
from utils.errors import SchemaError, TransmissionFailedError

@pytest.fixture
def payload_file(tmp_path, template_payload):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(template_payload))
    return str(path)

@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setenv("SPARKPOST_API_KEY", "env-key")
    monkeypatch.delenv("SPARKPOST_SANDBOX", raising=False)
    monkeypatch.delenv("SPARKPOST_ENDPOINT", raising=False)

@patch("send_transmission.load_dotenv")
@patch("send_transmission.SparkPostClient")
def test_main_success(MockClient, mock_dotenv, payload_file, template_payload, capsys):
    client = MockClient.return_value.__enter__.return_value
    client.transmission = AsyncMock(return_value=TransmissionSuccess.model_validate(
        {"results": {"id": "42", "total_accepted_recipients": 1, "total_rejected_recipients": 0}}
    ))

    code = send_transmission.main([payload_file, "--sandbox"])

    assert code == send_transmission.EXIT_OK
    config = MockClient.call_args[0][0]
    assert config.api_key == "env-key"
    assert config.sandbox is True
    client.transmission.assert_awaited_once_with(template_payload)
    assert "Transmission 42: 1 accepted, 0 rejected" in capsys.readouterr().out

@patch("send_transmission.load_dotenv")
@patch("send_transmission.SparkPostClient")
def test_main_business_failure(MockClient, mock_dotenv, payload_file):
    failure = TransmissionFailure.model_validate(
        {"errors": [{"description": "d", "code": "1", "message": "bad recipient"}]}
    )
    client = MockClient.return_value.__enter__.return_value
    client.transmission = AsyncMock(side_effect=TransmissionFailedError(failure))

    assert send_transmission.main([payload_file]) == send_transmission.EXIT_FAILED

@patch("send_transmission.load_dotenv")
@patch("send_transmission.SparkPostClient")
def test_main_schema_error(MockClient, mock_dotenv, payload_file):
    client = MockClient.return_value.__enter__.return_value
    client.transmission = AsyncMock(side_effect=SchemaError([{"loc": ("recipients",), "msg": "too short"}]))

    assert send_transmission.main([payload_file]) == send_transmission.EXIT_SCHEMA

@patch("send_transmission.load_dotenv")
def test_main_without_api_key(mock_dotenv, payload_file, monkeypatch):
    monkeypatch.delenv("SPARKPOST_API_KEY")
    assert send_transmission.main([payload_file]) == send_transmission.EXIT_SCHEMA
