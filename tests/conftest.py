import pytest

from tweet_metadata.config import Config


@pytest.fixture
def config():
    return Config(
        api_key="key",
        api_secret="secret",
        bearer_token="",
        api_base_url="https://api.twitter.test",
        fetch=True,
        http_timeout=5.0,
        retry_max_attempts=3,
        retry_wait_min=0,
        retry_wait_max=0,
        log_level="DEBUG",
    )
