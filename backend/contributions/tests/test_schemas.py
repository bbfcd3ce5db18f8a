"""
Test: Inbound validation models
"""

import pytest
from pydantic import ValidationError

from contributions.models.api import (
    ContributionIn,
    ContributionReactionIn,
    ContributionSessionIn,
    ContributionTargetRelationshipIn,
)
from contributions.models.domain import (
    ApiTokenAuth,
    AuthMethod,
    Contribution,
    ContributionTargetRelationship,
    EmailAuth,
    OAuthDelegatedAuth,
)

SESSION = {
    "id": "a1b2c3d4e5",
    "auth": {"type": "emailAuth", "email": "test@example.com"},
    "userAgent": {"ipAddress": "127.0.0.1"},
}


class TestSessionIn:

    @pytest.mark.parametrize("auth, expected", [
        ({"type": "apiTokenAuth", "apiToken": "token123"}, ApiTokenAuth(api_token="token123")),
        ({"type": "oAuthDelegatedAuth", "oAuthSessionId": "s1"}, OAuthDelegatedAuth(oauth_session_id="s1")),
        ({"type": "emailAuth", "email": "a@b.c"}, EmailAuth(email="a@b.c")),
    ])
    def test_auth_variants(self, auth, expected):
        session = ContributionSessionIn.model_validate({**SESSION, "auth": auth}).to_domain()
        assert session.auth == expected

    def test_unknown_auth_type_rejected(self):
        with pytest.raises(ValidationError):
            ContributionSessionIn.model_validate({**SESSION, "auth": {"type": "password", "password": "x"}})

    def test_wrong_payload_for_tag_rejected(self):
        with pytest.raises(ValidationError):
            ContributionSessionIn.model_validate({**SESSION, "auth": {"type": "emailAuth", "apiToken": "x"}})

    def test_party_fields(self):
        data = {
            **SESSION,
            "person": {"partyID": "p1", "firstName": "Ada"},
            "organization": {"partyID": "o1", "name": "Org"},
        }
        session = ContributionSessionIn.model_validate(data).to_domain()

        assert session.auth_method == AuthMethod.EMAIL
        assert session.person.first_name == "Ada"
        assert session.organization.name == "Org"

    def test_snake_case_accepted(self):
        data = {**SESSION, "user_agent": {"ip_address": "10.0.0.1", "host": "example"}}
        del data["userAgent"]

        session = ContributionSessionIn.model_validate(data).to_domain()

        assert session.user_agent.ip_address == "10.0.0.1"
        assert session.user_agent.host == "example"


class TestContributionIn:

    def test_to_domain(self):
        contribution = ContributionIn.model_validate({
            "id": "sub1",
            "content": "Sub message 1",
            "parentId": "root1",
            "session": SESSION,
            "timestamp": "2024-01-02T03:04:05+00:00",
        }).to_domain()

        assert isinstance(contribution, Contribution)
        assert contribution.parent_id == "root1"
        assert contribution.timestamp.year == 2024
        assert contribution.session.id == "a1b2c3d4e5"

    def test_timestamp_defaults_to_now(self):
        contribution = ContributionIn.model_validate({"id": "c", "content": "x", "session": SESSION}).to_domain()
        assert contribution.timestamp.tzinfo is not None

    def test_missing_content_rejected(self):
        with pytest.raises(ValidationError):
            ContributionIn.model_validate({"id": "c", "session": SESSION})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ContributionIn.model_validate({"id": "c", "content": "x", "session": SESSION, "tags": ["a"]})


class TestReactionAndRelationshipIn:

    def test_reaction(self):
        reaction = ContributionReactionIn.model_validate({
            "reactionId": "r1",
            "contributionId": "sub1",
            "reaction": "like",
            "session": SESSION,
        }).to_domain()

        assert reaction.contribution_id == "sub1"
        assert reaction.reaction == "like"

    def test_relationship(self):
        relationship = ContributionTargetRelationshipIn.model_validate({
            "contribution": {"id": "c1", "content": "x", "session": SESSION},
            "target": {"targetID": "https://example.com/post"},
        }).to_domain()

        assert isinstance(relationship, ContributionTargetRelationship)
        assert relationship.contribution_id == "c1"
        assert relationship.target_id == "https://example.com/post"
