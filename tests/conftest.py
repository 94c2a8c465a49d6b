"""Shared pytest fixtures for the redirector tests.

Every test builds the application from an in-memory Config; no
configuration file is read unless a test writes one itself.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.domain.models import Config, Package
from app.main import create_app


@pytest.fixture
def config() -> Config:
    """Return a configuration with two packages."""
    return Config(
        url="go.example.com",
        packages={
            "foo": Package(repo="github.com/example/foo"),
            "bar.baz": Package(repo="gitlab.com/example/bar-baz", branch="main"),
        },
    )


@pytest.fixture
def app(config: Config) -> FastAPI:
    """Return the application built from the test configuration."""
    return create_app(config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Return a test client that reports server faults as 500 responses."""
    return TestClient(app, raise_server_exceptions=False)
