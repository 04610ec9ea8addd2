"""Pytest configuration and fixtures for integration tests.

Loads .env and skips the whole suite unless a live recipe service is
configured, since these tests hit the real generation backend.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load environment variables before test collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)

    print("\n" + "=" * 70)
    print("Note: These tests require a running recipe service (RECIPE_API_BASE_URL)")
    print(f"Environment loaded from: {env_path}")
    print("=" * 70 + "\n")


@pytest.fixture(scope="session", autouse=True)
def check_service_url():
    """Skip integration tests when no service URL is configured."""
    if not os.getenv("RECIPE_API_BASE_URL"):
        pytest.skip(
            "Integration tests skipped. Missing RECIPE_API_BASE_URL. Please set it in your .env file.",
            allow_module_level=True,
        )
