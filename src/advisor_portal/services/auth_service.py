"""Local authentication against accounts held in the entity store."""

from typing import Optional, Tuple

from loguru import logger

from ..core.exceptions import ConflictError, UnauthorizedError
from ..core.security import hash_password, verify_password
from ..models import User
from ..sessions import LOCAL, Session, SessionStore
from ..store import EntityStore, principal_of


class AuthService:
    """Register and log in local advisor accounts."""

    def __init__(self, store: EntityStore, sessions: SessionStore):
        self.store = store
        self.sessions = sessions

    def register(
        self,
        username: str,
        password: str,
        name: str,
        mobile_number: str = "",
        email: Optional[str] = None,
        salutation: Optional[str] = None,
        age_group: Optional[str] = None,
    ) -> Tuple[User, Session]:
        """
        Create a local account and log it in.

        Returns: (user, session)
        """
        if self.store.users.username_exists(username):
            raise ConflictError("Username already exists")
        if email and self.store.users.email_exists(email):
            raise ConflictError("Email already registered")

        user = self.store.users.create(
            username=username,
            password_hash=hash_password(password),
            name=name,
            mobile_number=mobile_number,
            email=email,
            salutation=salutation,
            age_group=age_group,
        )
        logger.info(f"Registered local account {username} (id {user.id})")

        return user, self._start_session(user)

    def login(
        self,
        password: str,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Tuple[User, Session]:
        """Check credentials and start a session."""
        user = None
        if username:
            user = self.store.users.get_by_username(username)
        elif email:
            user = self.store.users.get_by_email(email)

        if not user or not user.password_hash or not verify_password(password, user.password_hash):
            logger.warning(f"Failed local login for {username or email}")
            raise UnauthorizedError("Incorrect username or password")

        logger.info(f"Local login for {user.username} (id {user.id})")
        return user, self._start_session(user)

    def logout(self, session: Session) -> None:
        self.sessions.destroy(session.id)
        logger.info(f"Local logout for advisor {session.advisor_id}")

    def _start_session(self, user: User) -> Session:
        return self.sessions.create(
            principal=principal_of(user),
            advisor_id=user.id,
            mode=LOCAL,
        )
