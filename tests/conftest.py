import pytest
from models.config import HttpConfig, SparkPostConfig, ThrottleConfig

@pytest.fixture
def config():
    return SparkPostConfig(
        api_key="test-key",
        endpoint="https://api.sparkpost.test/api",
        http=HttpConfig(throttle=ThrottleConfig(rate=0), max_attempts=3),
    )

@pytest.fixture
def sandbox_config(config):
    return config.model_copy(update={"sandbox": True})

@pytest.fixture
def inline_payload():
    return {
        "recipients": [
            {
                "address": {"email": "wilma@example.com", "name": "Wilma"},
                "tags": ["vip"],
                "substitution_data": {"first_name": "Wilma"},
            },
            "weekly-newsletter-list",
        ],
        "content": {
            "subject": "Hello {{first_name}}",
            "from": {"name": "Outreach", "email": "outreach@example.com"},
            "html": "<p>Hello {{first_name}}</p>",
            "text": "Hello {{first_name}}",
        },
        "campaign_id": "spring-launch",
    }

@pytest.fixture
def template_payload():
    return {
        "recipients": [{"address": {"email": "fred@example.com"}}],
        "content": {"template_id": "welcome-email", "use_draft_template": False},
        "options": {"open_tracking": True, "sandbox": False},
    }

@pytest.fixture
def success_body():
    return '{"results":{"id":"abc","total_accepted_recipients":1,"total_rejected_recipients":0}}'

@pytest.fixture
def failure_body():
    return '{"errors":[{"description":"d","code":"1","message":"bad recipient"}]}'
