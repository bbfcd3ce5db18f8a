"""
Pydantic models for validating inbound contribution data
"""
from .schemas import (
    PersonIn,
    OrganizationIn,
    UserAgentIn,
    ApiTokenAuthIn,
    OAuthDelegatedAuthIn,
    EmailAuthIn,
    SessionAuthIn,
    ContributionSessionIn,
    ContributionIn,
    ContributionReactionIn,
    ContributionTargetIn,
    ContributionTargetRelationshipIn,
)

__all__ = [
    'PersonIn',
    'OrganizationIn',
    'UserAgentIn',
    'ApiTokenAuthIn',
    'OAuthDelegatedAuthIn',
    'EmailAuthIn',
    'SessionAuthIn',
    'ContributionSessionIn',
    'ContributionIn',
    'ContributionReactionIn',
    'ContributionTargetIn',
    'ContributionTargetRelationshipIn',
]
