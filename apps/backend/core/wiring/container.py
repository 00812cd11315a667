"""Composition root for dependency injection.

Factories here assemble use cases with concrete adapters. The store, the
identity provider and the guard are process-wide singletons; use cases are
cheap and share them.
"""

from __future__ import annotations

from django.conf import settings

from apps.backend.core.application.article_use_cases import (
    AddCommentToArticleUseCase,
    CreateArticleUseCase,
)
from apps.backend.core.application.auth_guard import AuthorizationGuard
from apps.backend.core.application.ports import UserUpdatePolicy
from apps.backend.core.application.user_use_cases import (
    FollowUseCase,
    GetCurrentUserUseCase,
    GetProfileUseCase,
    LoginUseCase,
    RegisterUserUseCase,
    UnfollowUseCase,
    UpdateUserUseCase,
)
from apps.backend.core.adapters.driven.identity.simplejwt_identity import SimpleJWTIdentityProvider
from apps.backend.core.adapters.driven.persistence.in_memory import InMemoryStore
from apps.backend.core.adapters.driven.security.django_hasher import DjangoPasswordHasher
from apps.backend.core.adapters.driven.time.clock import RealClock


_singletons: dict[str, object] = {}


def get_singleton(key: str, factory):
    if key not in _singletons:
        _singletons[key] = factory()
    return _singletons[key]


def reset() -> None:
    """Drop every singleton (fresh store). Used by tests."""
    _singletons.clear()


def get_store() -> InMemoryStore:
    return get_singleton("store", InMemoryStore)


def get_identity() -> SimpleJWTIdentityProvider:
    return get_singleton("identity", SimpleJWTIdentityProvider)


def get_hasher() -> DjangoPasswordHasher:
    return get_singleton("hasher", DjangoPasswordHasher)


def get_clock() -> RealClock:
    return get_singleton("clock", RealClock)


def get_guard() -> AuthorizationGuard:
    return get_singleton("guard", lambda: AuthorizationGuard(get_identity()))


def get_user_update_policy() -> UserUpdatePolicy:
    return UserUpdatePolicy(
        allow_password_change=getattr(settings, "CONDUIT_ALLOW_PASSWORD_CHANGE", True),
    )


# ============================================================================
# Use cases
# ============================================================================

def get_register_user_uc() -> RegisterUserUseCase:
    return RegisterUserUseCase(get_store().users, get_identity(), get_hasher())


def get_login_uc() -> LoginUseCase:
    return LoginUseCase(get_store().users, get_identity(), get_hasher())


def get_current_user_uc() -> GetCurrentUserUseCase:
    return GetCurrentUserUseCase(get_store().users)


def get_update_user_uc() -> UpdateUserUseCase:
    return UpdateUserUseCase(
        get_store().users,
        get_identity(),
        get_hasher(),
        policy=get_user_update_policy(),
    )


def get_profile_uc() -> GetProfileUseCase:
    store = get_store()
    return GetProfileUseCase(store.users, store.follows)


def get_follow_uc() -> FollowUseCase:
    store = get_store()
    return FollowUseCase(store.users, store.follows)


def get_unfollow_uc() -> UnfollowUseCase:
    store = get_store()
    return UnfollowUseCase(store.users, store.follows)


def get_create_article_uc() -> CreateArticleUseCase:
    store = get_store()
    return CreateArticleUseCase(store.articles, store.users, get_clock())


def get_add_comment_uc() -> AddCommentToArticleUseCase:
    store = get_store()
    return AddCommentToArticleUseCase(store.articles, store.comments, store.users, get_clock())
