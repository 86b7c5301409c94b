"""
Test Configuration
==================

Pytest configuration with fixtures for unit and integration tests.
Provides test settings, data holders and an in-process fake frontend.
"""

import pytest
import pytest_asyncio
from datetime import datetime
from typing import AsyncGenerator, Generator

from aiohttp.test_utils import TestServer
from pydantic_settings import SettingsConfigDict

# Import application modules
import experimentation.config.settings as settings_module
from experimentation.config.settings import Settings
from experimentation.core.data import ConstantDataHolder, DataHolder

from tests.utils.mocks import FakeWorkloadModelFrontend


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"
    frontend_host: str = "127.0.0.1"
    request_timeout: float = 5.0
    poll_interval: float = 0.0

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Install the test settings as the global settings instance."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


class WorkloadModelHolders:
    """Input and output holders of a workload model generation."""

    def __init__(self, data_link: str = "http://session-logs:8080/logs"):
        self.data_link = ConstantDataHolder("data-link", data_link)
        self.start_time: DataHolder[datetime] = DataHolder("start-time")
        self.stop_time: DataHolder[datetime] = DataHolder("stop-time")
        self.workload_link: DataHolder[str] = DataHolder("workload-link")
        self.broken: DataHolder[bool] = DataHolder("broken")


@pytest.fixture
def holders() -> WorkloadModelHolders:
    """Fresh data holders for one workload model generation."""
    return WorkloadModelHolders()


@pytest_asyncio.fixture
async def fake_frontend() -> AsyncGenerator[FakeWorkloadModelFrontend, None]:
    """Fake ContinuITy frontend served on a local port."""
    frontend = FakeWorkloadModelFrontend()
    server = TestServer(frontend.build_app())
    await server.start_server()
    frontend.host = server.host
    frontend.port = str(server.port)

    yield frontend

    await server.close()


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on file paths."""
    for item in items:
        # Add markers based on file path
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
