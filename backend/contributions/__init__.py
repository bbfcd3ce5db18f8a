"""
Contributions
=============

User-generated content (comments, forum posts, chat messages) attached to
arbitrary targets, authored under authenticated sessions, optionally
reacted to.

Contributions are stored flat, with parent_id as the only structural link,
so any key/value, document or relational store can hold them. Threads are
rebuilt as nested HierarchicalContribution trees on read.

ARCHITECTURE:
    TypicalContributionInteraction (facade)
        → ContributionSessionRepository            (sessions)
        → ContributionRepository                   (contributions, reactions, threads)
        → ContributionTargetRelationshipRepository (contribution ↔ target)

PUBLIC API:
- Domain types: Contribution, ContributionSession, HierarchicalContribution, ...
- Repository interfaces and their in-memory implementations
- TypicalContributionInteraction
- render_contribution, render_thread
"""

from .errors import ContributionsError, InvalidInputError
from .config import Settings, ThreadStrategy, get_settings
from .models.domain import (
    PartyID,
    ContributionSessionID,
    ContributionID,
    ContributionTargetID,
    Party,
    Person,
    Organization,
    AuthMethod,
    UserAgent,
    ApiTokenAuth,
    OAuthDelegatedAuth,
    EmailAuth,
    ContributionSessionAuth,
    ContributionSession,
    Contribution,
    ContributionWithReactions,
    ContributionReaction,
    HierarchicalContribution,
    ContributionThread,
    ContributionTarget,
    ContributionTargetRelationship,
    PostedContribution,
)
from .repositories import (
    ContributionSessionRepository,
    ContributionRepository,
    ContributionTargetRelationshipRepository,
    InMemoryContributionSessionRepository,
    InMemoryContributionRepository,
    InMemoryContributionTargetRelationshipRepository,
)
from .services import TypicalContributionInteraction
from .presentation import render_contribution, render_thread

__all__ = [
    # Errors
    "ContributionsError",
    "InvalidInputError",

    # Configuration
    "Settings",
    "ThreadStrategy",
    "get_settings",

    # Domain
    "PartyID",
    "ContributionSessionID",
    "ContributionID",
    "ContributionTargetID",
    "Party",
    "Person",
    "Organization",
    "AuthMethod",
    "UserAgent",
    "ApiTokenAuth",
    "OAuthDelegatedAuth",
    "EmailAuth",
    "ContributionSessionAuth",
    "ContributionSession",
    "Contribution",
    "ContributionWithReactions",
    "ContributionReaction",
    "HierarchicalContribution",
    "ContributionThread",
    "ContributionTarget",
    "ContributionTargetRelationship",
    "PostedContribution",

    # Repositories
    "ContributionSessionRepository",
    "ContributionRepository",
    "ContributionTargetRelationshipRepository",
    "InMemoryContributionSessionRepository",
    "InMemoryContributionRepository",
    "InMemoryContributionTargetRelationshipRepository",

    # Facade
    "TypicalContributionInteraction",

    # Presentation
    "render_contribution",
    "render_thread",
]
