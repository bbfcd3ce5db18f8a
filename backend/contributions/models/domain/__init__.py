"""
Domain Models - Storage-agnostic data structures

These models represent the core contribution entities independent of the
storage layer. Stores and the interaction facade operate on these models.

Architecture:
- Domain models are pure Python objects (frozen dataclasses)
- Storage details are abstracted via repositories
- Hierarchical threads are derived on read, never persisted
"""

from .types import (
    PartyID,
    ContributionSessionID,
    ContributionID,
    ContributionTargetID,
)
from .party import Party, Person, Organization
from .session import (
    AuthMethod,
    UserAgent,
    ApiTokenAuth,
    OAuthDelegatedAuth,
    EmailAuth,
    ContributionSessionAuth,
    ContributionSession,
)
from .contribution import (
    Contribution,
    ContributionWithReactions,
    ContributionReaction,
    HierarchicalContribution,
    ContributionThread,
)
from .relationships import (
    ContributionTarget,
    ContributionTargetRelationship,
    PostedContribution,
)

__all__ = [
    # Identifiers
    'PartyID',
    'ContributionSessionID',
    'ContributionID',
    'ContributionTargetID',

    # Parties
    'Party',
    'Person',
    'Organization',

    # Sessions
    'AuthMethod',
    'UserAgent',
    'ApiTokenAuth',
    'OAuthDelegatedAuth',
    'EmailAuth',
    'ContributionSessionAuth',
    'ContributionSession',

    # Contributions
    'Contribution',
    'ContributionWithReactions',
    'ContributionReaction',
    'HierarchicalContribution',
    'ContributionThread',

    # Relationships
    'ContributionTarget',
    'ContributionTargetRelationship',
    'PostedContribution',
]
