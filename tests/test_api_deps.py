"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types. Uses the fake gateway and patched settings.
"""

import pytest
from fastapi import HTTPException
from unittest.mock import patch

from api.deps import (
    get_hevy_client,
    get_hevy_gateway,
    get_progression_service,
    get_summary_service,
    get_template_cache,
    get_tool_executor,
)
from backend.core.exercise_catalog import ExerciseTemplateCache
from backend.core.progression_service import LiftProgressionService
from backend.core.workout_summary_service import WorkoutSummaryService
from backend.services.tool_executor import ToolExecutor
from backend.settings import Settings
from infrastructure import HevyClient
from tests.fakes import FakeHevyGateway

# All tests in this module are pure logic tests with fakes - mark as unit
pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_client_cache():
    get_hevy_client.cache_clear()
    yield
    get_hevy_client.cache_clear()


# =============================================================================
# Hevy Client Provider Tests
# =============================================================================


class TestGetHevyClient:
    """Tests for get_hevy_client and get_hevy_gateway."""

    def test_returns_none_without_api_key(self):
        with patch("api.deps._get_settings", return_value=Settings(_env_file=None, hevy_api_key=None)):
            assert get_hevy_client() is None

    def test_builds_client_from_settings(self):
        settings = Settings(
            _env_file=None,
            hevy_api_key="secret",
            hevy_base_url="https://hevy.test",
        )
        with patch("api.deps._get_settings", return_value=settings):
            client = get_hevy_client()

        assert isinstance(client, HevyClient)
        assert client is get_hevy_client()

    def test_gateway_raises_503_without_client(self):
        with patch("api.deps.get_hevy_client", return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                get_hevy_gateway()

        assert exc_info.value.status_code == 503


# =============================================================================
# Service Provider Tests
# =============================================================================


class TestServiceProviders:
    """Tests for the cache, service and executor providers."""

    def test_template_cache_is_shared_per_gateway(self):
        gateway = FakeHevyGateway()
        other = FakeHevyGateway()

        assert get_template_cache(gateway) is get_template_cache(gateway)
        assert get_template_cache(gateway) is not get_template_cache(other)
        assert isinstance(get_template_cache(gateway), ExerciseTemplateCache)

    def test_services_use_settings(self):
        gateway = FakeHevyGateway()
        cache = get_template_cache(gateway)
        settings = Settings(
            _env_file=None,
            workout_detail_concurrency=3,
            sort_progress_defensively=True,
        )

        summary = get_summary_service(gateway, cache, settings)
        progression = get_progression_service(gateway, cache, settings)

        assert isinstance(summary, WorkoutSummaryService)
        assert isinstance(progression, LiftProgressionService)
        assert summary._detail_concurrency == 3
        assert progression._sort_progress_defensively is True

    def test_tool_executor(self):
        gateway = FakeHevyGateway()
        cache = get_template_cache(gateway)
        settings = Settings(_env_file=None)

        executor = get_tool_executor(
            get_summary_service(gateway, cache, settings),
            get_progression_service(gateway, cache, settings),
            cache,
        )

        assert isinstance(executor, ToolExecutor)
        assert "get-workout-summary" in executor.tool_names


# =============================================================================
# Package Exports
# =============================================================================


class TestDepsImports:
    """All providers should be importable from the api package."""

    def test_import_from_api_package(self):
        from api import (
            get_settings,
            get_hevy_client,
            get_hevy_gateway,
            get_template_cache,
            get_summary_service,
            get_progression_service,
            get_tool_executor,
        )
        assert all([
            get_settings,
            get_hevy_client,
            get_hevy_gateway,
            get_template_cache,
            get_summary_service,
            get_progression_service,
            get_tool_executor,
        ])
