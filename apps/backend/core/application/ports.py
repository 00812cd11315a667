"""
Port Definitions (Interfaces)

Ports are contracts that define how the application core interacts with external systems.
They are implemented by adapters in the adapters/ directory.

Following the Dependency Inversion Principle:
- Application core defines WHAT it needs (ports)
- Adapters implement HOW to provide it (concrete implementations)
- Core NEVER imports from adapters (dependency points inward)

All ports use Protocol (PEP 544) for structural subtyping.
Every fallible operation returns a Result instead of raising.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from apps.backend.core.domain import (
    Article,
    ArticlePatch,
    Comment,
    User,
    UserPatch,
)
from apps.backend.core.application.result import Result


# ============================================================================
# Identity Ports
# ============================================================================

@dataclass(frozen=True)
class Identity:
    """An acting user established from a verified token."""
    user_id: str
    token: str


class IdentityPort(Protocol):
    """
    Port for issuing and verifying identity tokens.

    Implementations:
    - SimpleJWTIdentityProvider: signed JWT access tokens (production)
    - Fake providers in tests
    """

    def issue(self, user_id: str) -> str:
        """
        Produce an opaque token encoding the identity.

        Distinct user ids never produce tokens that verify to the same id.
        """
        ...

    def verify(self, token: str) -> Result[str]:
        """
        Resolve a token to the user id it was issued for.

        Returns:
            Success(user_id), or Failure(INVALID_TOKEN) when the token is
            malformed, expired or fails its integrity check.

        Side-effect free.
        """
        ...


class PasswordHasherPort(Protocol):
    """Port for turning raw passwords into verifiable secrets."""

    def hash(self, raw_password: str) -> str:
        ...

    def verify(self, raw_password: str, encoded: str) -> bool:
        ...


# ============================================================================
# Repository Ports (Data Persistence)
# ============================================================================

class UserRepository(Protocol):
    """
    Repository for users.

    Uniqueness of username and email (case-insensitive) is enforced here,
    atomically with the write.
    """

    def create(self, user: User) -> Result[User]:
        """Persist a new user. Failure(CONFLICT) on a taken username or email."""
        ...

    def find_by_id(self, user_id: str) -> Result[User]:
        ...

    def find_by_username(self, username: str) -> Result[User]:
        ...

    def find_by_email(self, email: str) -> Result[User]:
        ...

    def update(self, user_id: str, patch: UserPatch) -> Result[User]:
        """
        Apply a partial patch.

        Returns:
            Updated user, Failure(NOT_FOUND) for an unknown id, or
            Failure(CONFLICT) when the new username/email belongs to someone else.
        """
        ...


class ArticleRepository(Protocol):
    """Repository for articles, keyed by slug."""

    def create(self, article: Article) -> Result[Article]:
        """Persist a new article. Failure(CONFLICT) when the slug is taken."""
        ...

    def find_by_slug(self, slug: str) -> Result[Article]:
        ...

    def update(self, slug: str, patch: ArticlePatch, timestamp: datetime) -> Result[Article]:
        """Apply a partial patch and refresh updated_at to `timestamp`."""
        ...


class CommentRepository(Protocol):
    """Repository for comments, keyed by a monotonically increasing id."""

    def next_id(self) -> int:
        """Allocate the next comment id. Never returns the same id twice."""
        ...

    def create(self, comment: Comment) -> Result[Comment]:
        ...

    def find_by_id(self, comment_id: int) -> Result[Comment]:
        ...

    def find_by_article(self, article_slug: str) -> list[Comment]:
        """Comments on an article, oldest first."""
        ...


class FollowRepository(Protocol):
    """Repository for directed follow edges (follower -> followed)."""

    def add_edge(self, follower_id: str, followed_id: str) -> Result[None]:
        """Failure(CONFLICT) when the edge already exists."""
        ...

    def remove_edge(self, follower_id: str, followed_id: str) -> Result[None]:
        """Failure(NOT_FOUND) when there is no such edge."""
        ...

    def exists(self, follower_id: str, followed_id: str) -> bool:
        ...


# ============================================================================
# Infrastructure Ports
# ============================================================================

class ClockPort(Protocol):
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime."""
        ...


@dataclass(frozen=True)
class UserUpdatePolicy:
    """
    Policy knobs for update-user.

    allow_password_change: when False, a password in the patch is rejected
    with a ValidationError instead of being applied.
    """
    allow_password_change: bool = True
