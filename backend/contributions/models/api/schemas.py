"""
Pydantic models for inbound contribution data

Parse and type-check user-supplied data before it reaches the stores.
Field names accept snake_case and the camelCase names used by clients
(parentId, ipAddress, ...). Every model converts with to_domain().
"""

from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union

from ..domain import (
    ApiTokenAuth,
    Contribution,
    ContributionReaction,
    ContributionSession,
    ContributionTarget,
    ContributionTargetRelationship,
    EmailAuth,
    OAuthDelegatedAuth,
    Organization,
    Person,
    UserAgent,
)

_CONFIG = {
    "populate_by_name": True,
    "extra": "forbid",
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PersonIn(BaseModel):
    party_id: str = Field(alias="partyID")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")

    model_config = _CONFIG

    def to_domain(self) -> Person:
        return Person(
            party_id=self.party_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            profile_picture=self.profile_picture,
        )


class OrganizationIn(BaseModel):
    party_id: str = Field(alias="partyID")
    name: str

    model_config = _CONFIG

    def to_domain(self) -> Organization:
        return Organization(party_id=self.party_id, name=self.name)


class UserAgentIn(BaseModel):
    ip_address: str = Field(alias="ipAddress")
    host: Optional[str] = None

    model_config = _CONFIG

    def to_domain(self) -> UserAgent:
        return UserAgent(ip_address=self.ip_address, host=self.host)


class ApiTokenAuthIn(BaseModel):
    type: Literal["apiTokenAuth"] = "apiTokenAuth"
    api_token: str = Field(alias="apiToken")

    model_config = _CONFIG

    def to_domain(self) -> ApiTokenAuth:
        return ApiTokenAuth(api_token=self.api_token)


class OAuthDelegatedAuthIn(BaseModel):
    type: Literal["oAuthDelegatedAuth"] = "oAuthDelegatedAuth"
    oauth_session_id: str = Field(alias="oAuthSessionId")

    model_config = _CONFIG

    def to_domain(self) -> OAuthDelegatedAuth:
        return OAuthDelegatedAuth(oauth_session_id=self.oauth_session_id)


class EmailAuthIn(BaseModel):
    type: Literal["emailAuth"] = "emailAuth"
    email: str

    model_config = _CONFIG

    def to_domain(self) -> EmailAuth:
        return EmailAuth(email=self.email)


SessionAuthIn = Annotated[
    Union[ApiTokenAuthIn, OAuthDelegatedAuthIn, EmailAuthIn],
    Field(discriminator="type"),
]


class ContributionSessionIn(BaseModel):
    id: str
    auth: SessionAuthIn
    user_agent: UserAgentIn = Field(alias="userAgent")
    person: Optional[PersonIn] = None
    organization: Optional[OrganizationIn] = None

    model_config = _CONFIG

    def to_domain(self) -> ContributionSession:
        return ContributionSession(
            id=self.id,
            auth=self.auth.to_domain(),
            user_agent=self.user_agent.to_domain(),
            person=self.person.to_domain() if self.person else None,
            organization=self.organization.to_domain() if self.organization else None,
        )


class ContributionIn(BaseModel):
    """Request model for posting a contribution"""
    id: str
    content: str
    session: ContributionSessionIn
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    timestamp: datetime = Field(default_factory=_now)

    model_config = _CONFIG

    def to_domain(self) -> Contribution:
        return Contribution(
            id=self.id,
            content=self.content,
            session=self.session.to_domain(),
            parent_id=self.parent_id,
            timestamp=self.timestamp,
        )


class ContributionReactionIn(BaseModel):
    """Request model for reacting to a contribution"""
    reaction_id: str = Field(alias="reactionId")
    contribution_id: str = Field(alias="contributionId")
    reaction: str
    session: ContributionSessionIn
    timestamp: datetime = Field(default_factory=_now)

    model_config = _CONFIG

    def to_domain(self) -> ContributionReaction:
        return ContributionReaction(
            reaction_id=self.reaction_id,
            contribution_id=self.contribution_id,
            reaction=self.reaction,
            session=self.session.to_domain(),
            timestamp=self.timestamp,
        )


class ContributionTargetIn(BaseModel):
    target_id: str = Field(alias="targetID")

    model_config = _CONFIG

    def to_domain(self) -> ContributionTarget:
        return ContributionTarget(target_id=self.target_id)


class ContributionTargetRelationshipIn(BaseModel):
    """Request model for posting a contribution against a target"""
    contribution: ContributionIn
    target: ContributionTargetIn

    model_config = _CONFIG

    def to_domain(self) -> ContributionTargetRelationship:
        return ContributionTargetRelationship(
            contribution=self.contribution.to_domain(),
            target=self.target.to_domain(),
        )
