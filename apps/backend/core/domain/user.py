"""
User Domain Models

Users, viewer-relative profiles and the partial patch applied by update-user.
No framework dependencies.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional


class _Unset:
    """Marker for patch fields the caller did not send."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class User:
    """
    A registered author.

    `password_hash` is an opaque, verifiable secret produced by the password
    hasher port. It never leaves the core in any projection.

    Invariants:
    - id is stable and never changes
    - email is unique (case-insensitive), username is unique (case-sensitive)
    """
    id: str
    email: str
    username: str
    password_hash: str
    bio: Optional[str] = ""
    image: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("User id must not be empty")
        if not self.username:
            raise ValueError("Username must not be empty")

    @property
    def email_key(self) -> str:
        """Key used for email uniqueness and lookups."""
        return self.email.lower()

    def apply(self, patch: "UserPatch") -> "User":
        """Return a copy with every field present in the patch replaced."""
        changes = {
            name: value
            for name, value in (
                ("email", patch.email),
                ("username", patch.username),
                ("password_hash", patch.password_hash),
                ("bio", patch.bio),
                ("image", patch.image),
            )
            if value is not UNSET
        }
        return replace(self, **changes)

    def profile(self, following: bool = False) -> "Profile":
        return Profile(
            username=self.username,
            bio=self.bio,
            image=self.image,
            following=following,
        )


@dataclass(frozen=True)
class UserPatch:
    """
    Partial update for a User.

    Fields left as UNSET keep their previous value. `bio` and `image` may be
    set to None to clear them.
    """
    email: Any = UNSET
    username: Any = UNSET
    password_hash: Any = UNSET
    bio: Any = UNSET
    image: Any = UNSET

    @property
    def is_empty(self) -> bool:
        return all(
            value is UNSET
            for value in (self.email, self.username, self.password_hash, self.bio, self.image)
        )


@dataclass(frozen=True)
class Profile:
    """Read projection of a User, relative to whoever is looking at it."""
    username: str
    bio: Optional[str]
    image: Optional[str]
    following: bool = False


@dataclass(frozen=True)
class AuthenticatedUser:
    """A User together with the token the caller should keep using."""
    email: str
    token: str
    username: str
    bio: Optional[str]
    image: Optional[str]

    @classmethod
    def of(cls, user: User, token: str) -> "AuthenticatedUser":
        return cls(
            email=user.email,
            token=token,
            username=user.username,
            bio=user.bio,
            image=user.image,
        )
