"""
User Use Cases

register, login, get-current-user, update-user, get-profile, follow, unfollow.

Each use case is a class with a single `execute` method composed of small
steps chained with `flow`. A step either advances with a value or ends the
pipeline with a Failure, which is returned unchanged.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from apps.backend.core.domain import (
    UNSET,
    AuthenticatedUser,
    Profile,
    User,
    UserPatch,
)
from apps.backend.core.application.ports import (
    FollowRepository,
    Identity,
    IdentityPort,
    PasswordHasherPort,
    UserRepository,
    UserUpdatePolicy,
)
from apps.backend.core.application.result import (
    FieldErrors,
    Result,
    Success,
    flow,
    invalid_credentials,
    unauthorized,
    validation_error,
)
from apps.backend.core.application.validation import (
    EmailPolicy,
    check_email,
    check_optional_text,
    check_password,
    check_username,
    default_email_policy,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Commands
# ============================================================================

@dataclass(frozen=True)
class RegisterUserCommand:
    email: Any = None
    username: Any = None
    password: Any = None


@dataclass(frozen=True)
class LoginCommand:
    email: Any = None
    password: Any = None


@dataclass(frozen=True)
class UpdateUserCommand:
    """Fields left as UNSET were not sent and keep their current value."""
    email: Any = UNSET
    username: Any = UNSET
    password: Any = UNSET
    bio: Any = UNSET
    image: Any = UNSET


def require_identity(identity: Optional[Identity]) -> Result[Identity]:
    """First step of every use case acting on behalf of a user."""
    if identity is None:
        return unauthorized()
    return Success(identity)


def _issue_for(identity: IdentityPort) -> Callable[[User], Result[AuthenticatedUser]]:
    def step(user: User) -> Result[AuthenticatedUser]:
        return Success(AuthenticatedUser.of(user, identity.issue(user.id)))
    return step


# ============================================================================
# Register
# ============================================================================

class RegisterUserUseCase:
    """
    Register a new user.

    This use case:
    1. Validates email, username and password shape
    2. Hashes the password
    3. Persists the user (the repository enforces username/email uniqueness)
    4. Issues a token for the new identity

    Fails with ValidationError (every bad field reported) or Conflict.
    """

    def __init__(
        self,
        users: UserRepository,
        identity: IdentityPort,
        hasher: PasswordHasherPort,
        email_policy: EmailPolicy = default_email_policy,
    ):
        self._users = users
        self._identity = identity
        self._hasher = hasher
        self._email_policy = email_policy

    def execute(self, command: RegisterUserCommand) -> Result[AuthenticatedUser]:
        result = flow(
            command,
            self._validate,
            self._build_user,
            self._users.create,
            _issue_for(self._identity),
        )
        if result.is_success:
            logger.info(f"Registered user {result.value.username}")
        else:
            logger.info(f"Registration rejected ({result.kind.value}): {result.messages}")
        return result

    def _validate(self, command: RegisterUserCommand) -> Result[RegisterUserCommand]:
        errors = FieldErrors()
        email = check_email(errors, command.email, self._email_policy)
        username = check_username(errors, command.username)
        password = check_password(errors, command.password)
        return errors.result(RegisterUserCommand(email=email, username=username, password=password))

    def _build_user(self, command: RegisterUserCommand) -> Result[User]:
        return Success(User(
            id=str(uuid.uuid4()),
            email=command.email,
            username=command.username,
            password_hash=self._hasher.hash(command.password),
            bio="",
            image=None,
        ))


# ============================================================================
# Login
# ============================================================================

class LoginUseCase:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same InvalidCredentials
    failure. For an unknown email the password is still hashed once so both
    paths cost about the same.
    """

    def __init__(
        self,
        users: UserRepository,
        identity: IdentityPort,
        hasher: PasswordHasherPort,
    ):
        self._users = users
        self._identity = identity
        self._hasher = hasher

    def execute(self, command: LoginCommand) -> Result[AuthenticatedUser]:
        result = flow(
            command,
            self._validate,
            self._check_credentials,
            _issue_for(self._identity),
        )
        if result.is_success:
            logger.info(f"User {result.value.username} logged in successfully")
        else:
            logger.info(f"Login rejected ({result.kind.value})")
        return result

    def _validate(self, command: LoginCommand) -> Result[LoginCommand]:
        errors = FieldErrors()
        email = check_email(errors, command.email, lambda _: True)
        password = check_password(errors, command.password)
        return errors.result(LoginCommand(email=email, password=password))

    def _check_credentials(self, command: LoginCommand) -> Result[User]:
        found = self._users.find_by_email(command.email)
        if not found.is_success:
            self._hasher.hash(command.password)
            return invalid_credentials()
        user = found.value
        if not self._hasher.verify(command.password, user.password_hash):
            return invalid_credentials()
        return Success(user)


# ============================================================================
# Current user
# ============================================================================

class GetCurrentUserUseCase:
    """Return the acting user. The caller's token is passed through unchanged."""

    def __init__(self, users: UserRepository):
        self._users = users

    def execute(self, identity: Optional[Identity]) -> Result[AuthenticatedUser]:
        return flow(identity, require_identity, self._load)

    def _load(self, identity: Identity) -> Result[AuthenticatedUser]:
        return self._users.find_by_id(identity.user_id).map(
            lambda user: AuthenticatedUser.of(user, identity.token)
        )


class UpdateUserUseCase:
    """
    Apply a partial update to the acting user.

    Only fields present in the command change. email/username/password are
    validated like registration; bio and image accept a string or None.
    Uniqueness of a new username/email is re-checked by the repository.
    Password changes are subject to UserUpdatePolicy.
    """

    def __init__(
        self,
        users: UserRepository,
        identity: IdentityPort,
        hasher: PasswordHasherPort,
        policy: UserUpdatePolicy = UserUpdatePolicy(),
        email_policy: EmailPolicy = default_email_policy,
    ):
        self._users = users
        self._identity = identity
        self._hasher = hasher
        self._policy = policy
        self._email_policy = email_policy

    def execute(
        self,
        identity: Optional[Identity],
        command: UpdateUserCommand,
    ) -> Result[AuthenticatedUser]:
        authorized = require_identity(identity)
        if not authorized.is_success:
            return authorized
        user_id = authorized.value.user_id

        result = flow(
            command,
            self._build_patch,
            lambda patch: self._save(user_id, patch),
            _issue_for(self._identity),
        )
        if result.is_success:
            logger.info(f"Updated user {user_id}")
        else:
            logger.info(f"Update of user {user_id} rejected ({result.kind.value}): {result.messages}")
        return result

    def _save(self, user_id: str, patch: UserPatch) -> Result[User]:
        # Nothing sent: no write, the current user is returned as is.
        if patch.is_empty:
            return self._users.find_by_id(user_id)
        return self._users.update(user_id, patch)

    def _build_patch(self, command: UpdateUserCommand) -> Result[UserPatch]:
        errors = FieldErrors()
        email = username = password = UNSET

        if command.email is not UNSET:
            email = check_email(errors, command.email, self._email_policy)
        if command.username is not UNSET:
            username = check_username(errors, command.username)
        if command.password is not UNSET:
            if self._policy.allow_password_change:
                password = check_password(errors, command.password)
            else:
                errors.add("password", "cannot be changed")
        bio = check_optional_text(errors, "bio", command.bio)
        image = check_optional_text(errors, "image", command.image)

        if errors:
            return errors.to_failure()

        return Success(UserPatch(
            email=email,
            username=username,
            password_hash=self._hasher.hash(password) if password is not UNSET else UNSET,
            bio=bio,
            image=image,
        ))


# ============================================================================
# Profiles and follows
# ============================================================================

class GetProfileUseCase:
    """Look up a profile by username, relative to an optional viewer."""

    def __init__(self, users: UserRepository, follows: FollowRepository):
        self._users = users
        self._follows = follows

    def execute(self, viewer: Optional[Identity], username: str) -> Result[Profile]:
        return flow(
            username,
            self._users.find_by_username,
            lambda user: Success(user.profile(following=self._is_following(viewer, user))),
        )

    def _is_following(self, viewer: Optional[Identity], user: User) -> bool:
        if viewer is None:
            return False
        return self._follows.exists(viewer.user_id, user.id)


@dataclass(frozen=True)
class _FollowTarget:
    follower: User
    target: User


class _FollowEdgeUseCase(ABC):
    """
    Shared steps for follow and unfollow.

    Subclasses implement _change_edge() to add or remove the edge.
    """

    def __init__(self, users: UserRepository, follows: FollowRepository):
        self._users = users
        self._follows = follows

    def execute(self, identity: Optional[Identity], username: str) -> Result[Profile]:
        result = flow(
            identity,
            require_identity,
            self._load_follower,
            lambda follower: self._users.find_by_username(username).map(
                lambda target: _FollowTarget(follower=follower, target=target)
            ),
            self._reject_self_follow,
            self._change_edge,
        )
        if not result.is_success:
            logger.info(f"{type(self).__name__} of {username} rejected ({result.kind.value})")
        return result

    def _load_follower(self, identity: Identity) -> Result[User]:
        # A verified token may outlive its user (e.g. after a store reset).
        return self._users.find_by_id(identity.user_id)

    def _reject_self_follow(self, pair: _FollowTarget) -> Result[_FollowTarget]:
        if pair.follower.id == pair.target.id:
            return validation_error("username", "cannot follow yourself")
        return Success(pair)

    @abstractmethod
    def _change_edge(self, pair: _FollowTarget) -> Result[Profile]:
        """Add or remove the follower -> target edge."""
        pass


class FollowUseCase(_FollowEdgeUseCase):
    """Follow a user. Following twice is a Conflict."""

    def _change_edge(self, pair: _FollowTarget) -> Result[Profile]:
        return self._follows.add_edge(pair.follower.id, pair.target.id).map(
            lambda _: pair.target.profile(following=True)
        )


class UnfollowUseCase(_FollowEdgeUseCase):
    """Stop following a user. Unfollowing someone not followed is NotFound."""

    def _change_edge(self, pair: _FollowTarget) -> Result[Profile]:
        return self._follows.remove_edge(pair.follower.id, pair.target.id).map(
            lambda _: pair.target.profile(following=False)
        )
