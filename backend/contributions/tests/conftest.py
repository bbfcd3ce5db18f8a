"""
Pytest configuration for contribution tests.
"""

import pytest
import pytest_asyncio

from contributions.config import Settings, ThreadStrategy
from contributions.models.domain import (
    ApiTokenAuth,
    Contribution,
    ContributionSession,
    EmailAuth,
    UserAgent,
)
from contributions.repositories import (
    InMemoryContributionRepository,
    InMemoryContributionSessionRepository,
    InMemoryContributionTargetRelationshipRepository,
)
from contributions.services import TypicalContributionInteraction


def pytest_configure(config):
    """Configure pytest with asyncio marker."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an async test."
    )


@pytest.fixture
def settings() -> Settings:
    """Defaults only, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def user_agent() -> UserAgent:
    return UserAgent(ip_address="127.0.0.1")


@pytest.fixture
def email_session(user_agent) -> ContributionSession:
    return ContributionSession(id="a1b2c3d4e5", auth=EmailAuth(email="test@example.com"), user_agent=user_agent)


@pytest.fixture
def api_session(user_agent) -> ContributionSession:
    return ContributionSession(id="f6a7b8c9d0", auth=ApiTokenAuth(api_token="token123"), user_agent=user_agent)


@pytest.fixture
def make_contribution(email_session):
    """Factory: make_contribution("c1", parent_id="root")"""
    def _make(contribution_id: str, parent_id=None, content=None, session=None) -> Contribution:
        return Contribution(
            id=contribution_id,
            content=content if content is not None else f"Message {contribution_id}",
            session=session or email_session,
            parent_id=parent_id,
        )
    return _make


@pytest.fixture(params=[ThreadStrategy.SCAN, ThreadStrategy.INDEX], ids=["scan", "index"])
def contribution_repo(request) -> InMemoryContributionRepository:
    """Contribution store, once per thread strategy."""
    return InMemoryContributionRepository(thread_strategy=request.param)


@pytest.fixture
def session_repo() -> InMemoryContributionSessionRepository:
    return InMemoryContributionSessionRepository()


@pytest.fixture
def relationship_repo() -> InMemoryContributionTargetRelationshipRepository:
    return InMemoryContributionTargetRelationshipRepository()


@pytest_asyncio.fixture
async def interaction(settings):
    """Facade over fresh in-memory stores, torn down after the test."""
    facade = TypicalContributionInteraction(settings=settings)
    yield facade
    await facade.close()
