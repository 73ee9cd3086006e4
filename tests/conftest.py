"""Pytest configuration and fixtures."""

import os

import pytest

from src.form.models import ProjectFolder


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("OPENAI_API_KEY", "test-key")
    os.environ.setdefault("LLM_MODEL", "gpt-4")
    os.environ.setdefault("DB_HOST", "localhost")
    os.environ.setdefault("DB_NAME", "test_db")
    os.environ.setdefault("DB_USER", "test_user")
    os.environ.setdefault("DB_PASSWORD", "test_password")


class FakeFolderLookup:
    """In-memory folder source recording every lookup."""

    def __init__(self, folders_by_user: dict[str, list[ProjectFolder]] | None = None):
        self.folders_by_user = folders_by_user or {}
        self.calls: list[str] = []

    def fetch(self, user_identity: str) -> list[ProjectFolder]:
        self.calls.append(user_identity)
        return list(self.folders_by_user.get(user_identity, []))


@pytest.fixture
def folder_lookup():
    """Folder source with folders for two users."""
    return FakeFolderLookup(
        {
            "kari@example.no": [
                ProjectFolder(id=3, name="Blogg"),
                ProjectFolder(id=1, name="Nyheter"),
            ],
            "ola@example.no": [ProjectFolder(id=7, name="Reise")],
        }
    )


@pytest.fixture
def mock_settings():
    """Provide settings built from explicit values."""
    from src.config import Settings

    return Settings(
        openai_api_key="test-key",
        db_host="localhost",
        db_name="test_db",
        db_user="test_user",
        db_password="test_password",
    )
