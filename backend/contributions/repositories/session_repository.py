"""
Contribution Session Repository - in-memory storage for contribution sessions

Storage: process memory (dict keyed by session ID)
"""
import asyncio
import logging
from typing import Dict, Optional

from ..models.domain import (
    ContributionSession,
    ContributionSessionAuth,
    ContributionSessionID,
    Organization,
    Person,
    UserAgent,
)
from ..utils.id_generator import DEFAULT_SESSION_ID_SIZE, generate_session_id
from .base import ContributionSessionRepository

logger = logging.getLogger(__name__)


class InMemoryContributionSessionRepository(ContributionSessionRepository):
    """
    Repository for ContributionSession domain model

    Sessions live until timed out; there is no TTL.
    """

    def __init__(self, session_id_size: int = DEFAULT_SESSION_ID_SIZE):
        """
        Args:
            session_id_size: Hex chars per generated session ID (even, >= 10)
        """
        self.session_id_size = session_id_size

        self._sessions: Dict[ContributionSessionID, ContributionSession] = {}
        self._lock = asyncio.Lock()

    # =========================================================================
    # CREATE OPERATION
    # =========================================================================

    async def create_session(
        self,
        auth: ContributionSessionAuth,
        user_agent: UserAgent,
        person: Optional[Person] = None,
        organization: Optional[Organization] = None,
    ) -> ContributionSession:
        """
        Create a new session with a random hex ID.

        Args:
            auth: How the session was authenticated
            user_agent: Client network context
            person: Optional person behind the session
            organization: Optional organization behind the session

        Returns:
            The persisted session

        Raises:
            InvalidInputError: If session_id_size is odd or too small
        """
        async with self._lock:
            session_id = generate_session_id(self.session_id_size)
            while session_id in self._sessions:
                logger.warning(f"Session ID collision on {session_id}, regenerating")
                session_id = generate_session_id(self.session_id_size)

            session = ContributionSession(
                id=session_id,
                auth=auth,
                user_agent=user_agent,
                person=person,
                organization=organization,
            )
            self._sessions[session_id] = session

        logger.info(f"Created session {session.id} ({auth.type.value}) from {user_agent.ip_address}")
        return session

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def get_session(self, session_id: ContributionSessionID) -> Optional[ContributionSession]:
        """
        Retrieve session by ID.

        Returns:
            ContributionSession or None
        """
        async with self._lock:
            return self._sessions.get(session_id)

    async def count(self) -> int:
        """Number of live sessions"""
        async with self._lock:
            return len(self._sessions)

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    async def timeout_session(self, session: ContributionSession) -> ContributionSession:
        """
        Remove a session. Idempotent.

        Returns:
            The given session
        """
        async with self._lock:
            removed = self._sessions.pop(session.id, None)

        if removed is not None:
            logger.info(f"Timed out session {session.id}")
        else:
            logger.debug(f"Session {session.id} already absent")
        return session

    async def close(self) -> None:
        """Drop all sessions"""
        async with self._lock:
            self._sessions.clear()
