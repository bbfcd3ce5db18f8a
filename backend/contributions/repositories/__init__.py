"""
Repository Pattern - Storage abstraction layer

Repositories hide storage details from business logic. Consumers work with
domain models, not storage-specific types.

Interfaces (base.py):
- ContributionSessionRepository: session lifecycle
- ContributionRepository: flat contributions + reactions, thread rebuild
- ContributionTargetRelationshipRepository: contribution <-> target index

In-memory implementations are the reference backends; each instance owns
its records and guards them with its own asyncio.Lock.
"""
from .base import (
    ContributionSessionRepository,
    ContributionRepository,
    ContributionTargetRelationshipRepository,
)
from .session_repository import InMemoryContributionSessionRepository
from .contribution_repository import InMemoryContributionRepository
from .relationship_repository import InMemoryContributionTargetRelationshipRepository

__all__ = [
    'ContributionSessionRepository',
    'ContributionRepository',
    'ContributionTargetRelationshipRepository',
    'InMemoryContributionSessionRepository',
    'InMemoryContributionRepository',
    'InMemoryContributionTargetRelationshipRepository',
]
