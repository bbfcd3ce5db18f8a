"""
Contribution session domain model
"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Union
from enum import Enum

from .party import Organization, Person
from .types import ContributionSessionID


class AuthMethod(str, Enum):
    """How the session was authenticated (recorded, not verified)"""
    API_TOKEN = "apiTokenAuth"
    OAUTH_DELEGATED = "oAuthDelegatedAuth"
    EMAIL = "emailAuth"


@dataclass(frozen=True)
class UserAgent:
    """Client network context captured at session creation"""
    ip_address: str
    host: Optional[str] = None


@dataclass(frozen=True)
class ApiTokenAuth:
    api_token: str

    type: ClassVar[AuthMethod] = AuthMethod.API_TOKEN


@dataclass(frozen=True)
class OAuthDelegatedAuth:
    oauth_session_id: str

    type: ClassVar[AuthMethod] = AuthMethod.OAUTH_DELEGATED


@dataclass(frozen=True)
class EmailAuth:
    email: str

    type: ClassVar[AuthMethod] = AuthMethod.EMAIL


# Exactly one variant per session; the class is the tag
ContributionSessionAuth = Union[ApiTokenAuth, OAuthDelegatedAuth, EmailAuth]


@dataclass(frozen=True)
class ContributionSession:
    """
    Contribution session domain model - storage-agnostic representation

    One authenticated interaction window. Every contribution and reaction
    made in the window references the same session.

    Lifetime: created by the session store, lives until timed out.
    There is no automatic expiry.

    ID format: 10 lowercase hex chars by default
    """
    id: ContributionSessionID
    auth: ContributionSessionAuth
    user_agent: UserAgent

    # Optional party behind the session
    person: Optional[Person] = None
    organization: Optional[Organization] = None

    @property
    def auth_method(self) -> AuthMethod:
        """Tag of the auth variant"""
        return self.auth.type
