"""
Domain Layer - Pure Business Logic

This layer contains:
- Entities (User, Article, Comment)
- Value Objects and projections (Profile, AuthenticatedUser, ArticleView, CommentView)
- Domain services (slug derivation)

CRITICAL RULES:
- ZERO framework dependencies (no Django, no database, no HTTP)
- Pure Python only (stdlib + typing)
- All objects are immutable (dataclasses with frozen=True)
"""

from apps.backend.core.domain.user import (
    UNSET,
    User,
    UserPatch,
    Profile,
    AuthenticatedUser,
)

from apps.backend.core.domain.article import (
    Article,
    ArticlePatch,
    ArticleView,
    Comment,
    CommentView,
    slugify,
    disambiguate,
    unique_tags,
)

__all__ = [
    # Users
    "UNSET",
    "User",
    "UserPatch",
    "Profile",
    "AuthenticatedUser",
    # Articles
    "Article",
    "ArticlePatch",
    "ArticleView",
    "Comment",
    "CommentView",
    "slugify",
    "disambiguate",
    "unique_tags",
]
