"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: Deterministic ClientConfig independent of the environment
    - fake_backend: In-process FastAPI stand-in for the resume backend
    - api_client: ResumeApiClient routed to fake_backend via ASGITransport
    - stub_gateway: In-memory gateway with controllable query resolution
    - sample_resume: Small PDF-like ResumeDocument
"""

import httpx
import pytest

from src.client import ClientConfig, ResumeApiClient
from src.models import ResumeDocument
from tests.fake_backend import FakeResumeBackend
from tests.stub_gateway import SUMMARY, StubGateway


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a config that ignores the developer's environment."""
    return ClientConfig(
        api_base_url="http://test",
        request_timeout=5.0,
        upload_timeout=5.0,
        suggestion_limit=3,
        release_session_on_reset=True,
    )


@pytest.fixture
def fake_backend() -> FakeResumeBackend:
    return FakeResumeBackend(summary=SUMMARY)


@pytest.fixture
def api_client(client_config: ClientConfig, fake_backend: FakeResumeBackend) -> ResumeApiClient:
    """Gateway wired to the fake backend in-process."""
    return ResumeApiClient(client_config, transport=httpx.ASGITransport(app=fake_backend.app))


@pytest.fixture
def stub_gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture
def sample_resume() -> ResumeDocument:
    return ResumeDocument(
        filename="resume.pdf",
        content=b"%PDF-1.4\nJane Doe - Senior Software Engineer",
        content_type="application/pdf",
    )
