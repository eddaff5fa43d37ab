import pytest

from core.config import ServerConfig
from core.models import Success
from tools.dispatcher import Dispatcher


class StubClient:
    """Stands in for UpstreamClient: records requests, replays one outcome."""

    def __init__(self, outcome=None):
        self.outcome = outcome if outcome is not None else Success(200, {})
        self.sent = []

    def send(self, request):
        self.sent.append(request)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(api_base_url="https://api.example.test/v1", log_color=False)


@pytest.fixture
def stub_client() -> StubClient:
    return StubClient()


@pytest.fixture
def dispatcher(config: ServerConfig, stub_client: StubClient) -> Dispatcher:
    return Dispatcher(config, client=stub_client)
