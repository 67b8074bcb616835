import pytest

from tweet_metadata.config import load_config

ENV_VARS = [
    "TWITTER_API_KEY",
    "TWITTER_API_SECRET",
    "TWITTER_BEARER_TOKEN",
    "TWITTER_API_BASE_URL",
    "TWITTER_FETCH",
    "HTTP_TIMEOUT",
    "RETRY_MAX_ATTEMPTS",
    "RETRY_WAIT_MIN",
    "RETRY_WAIT_MAX",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()
    assert config.api_base_url == "https://api.twitter.com"
    assert config.fetch is True
    assert config.fetch_enabled is False
    assert config.retry_max_attempts == 3
    assert config.log_level == "INFO"


def test_credentials_enable_fetch(monkeypatch):
    monkeypatch.setenv("TWITTER_API_KEY", "k")
    monkeypatch.setenv("TWITTER_API_SECRET", "s")
    monkeypatch.setenv("TWITTER_API_BASE_URL", "https://api.example.com/")
    config = load_config()
    assert config.fetch_enabled is True
    assert config.api_base_url == "https://api.example.com"

    monkeypatch.setenv("TWITTER_FETCH", "off")
    assert load_config().fetch_enabled is False


def test_bearer_token_alone_enables_fetch(monkeypatch):
    monkeypatch.setenv("TWITTER_BEARER_TOKEN", "t")
    assert load_config().fetch_enabled is True


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "many")
    with pytest.raises(RuntimeError):
        load_config()

    monkeypatch.delenv("RETRY_MAX_ATTEMPTS")
    monkeypatch.setenv("LOG_LEVEL", "loud")
    with pytest.raises(RuntimeError):
        load_config()
