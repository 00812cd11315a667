"""
Article Domain Models

Articles, comments, their read projections and slug derivation.
No framework dependencies.
"""

import re
import unicodedata
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional

from apps.backend.core.domain.user import UNSET, Profile


# ============================================================================
# Slugs
# ============================================================================

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Derive a URL-safe slug from an article title.

    "Hello World" -> "hello-world", "Ça va?  Très bien!" -> "ca-va-tres-bien".
    Returns an empty string when the title has no letters or digits.
    """
    ascii_title = (
        unicodedata.normalize("NFKD", title)
        .encode("ascii", "ignore")
        .decode("ascii")
        .lower()
    )
    return _NON_ALNUM.sub("-", ascii_title).strip("-")


def disambiguate(base_slug: str, attempt: int) -> str:
    """
    Slug candidate for the n-th creation attempt.

    Attempt 1 is the base slug itself, later attempts append a numeric
    discriminator: hello-world, hello-world-2, hello-world-3, ...
    """
    if attempt < 1:
        raise ValueError("attempt starts at 1")
    if attempt == 1:
        return base_slug
    return f"{base_slug}-{attempt}"


def unique_tags(tags: list[str]) -> tuple[str, ...]:
    """Drop duplicate tags, keeping the first occurrence."""
    return tuple(dict.fromkeys(tags))


# ============================================================================
# Article
# ============================================================================

@dataclass(frozen=True)
class Article:
    """
    A published article.

    Lifecycle:
    1. Created by create-article with created_at == updated_at
    2. Edits refresh updated_at; slug and author_id never change
    """
    slug: str
    title: str
    description: str
    body: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    tag_list: tuple[str, ...] = ()
    favorites_count: int = 0

    def __post_init__(self):
        if not self.slug:
            raise ValueError("Slug must not be empty")
        if self.favorites_count < 0:
            raise ValueError("Favorites count cannot be negative")
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot precede created_at")

    def apply(self, patch: "ArticlePatch", timestamp: datetime) -> "Article":
        changes = {
            name: value
            for name, value in (
                ("title", patch.title),
                ("description", patch.description),
                ("body", patch.body),
                ("tag_list", patch.tag_list),
                ("favorites_count", patch.favorites_count),
            )
            if value is not UNSET
        }
        return replace(self, updated_at=timestamp, **changes)


@dataclass(frozen=True)
class ArticlePatch:
    """Partial update for an Article. UNSET fields are left untouched."""
    title: Any = UNSET
    description: Any = UNSET
    body: Any = UNSET
    tag_list: Any = UNSET
    favorites_count: Any = UNSET


@dataclass(frozen=True)
class ArticleView:
    """Article as seen by a viewer, with the author's profile embedded."""
    slug: str
    title: str
    description: str
    body: str
    tag_list: tuple[str, ...]
    created_at: datetime
    updated_at: datetime
    favorited: bool
    favorites_count: int
    author: Profile

    @classmethod
    def of(cls, article: Article, author: Profile, favorited: bool = False) -> "ArticleView":
        return cls(
            slug=article.slug,
            title=article.title,
            description=article.description,
            body=article.body,
            tag_list=article.tag_list,
            created_at=article.created_at,
            updated_at=article.updated_at,
            favorited=favorited,
            favorites_count=article.favorites_count,
            author=author,
        )


# ============================================================================
# Comment
# ============================================================================

@dataclass(frozen=True)
class Comment:
    """A comment on an article. Never mutated after creation."""
    id: int
    article_slug: str
    author_id: str
    body: str
    created_at: datetime
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self):
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)


@dataclass(frozen=True)
class CommentView:
    id: int
    article_slug: str
    body: str
    created_at: datetime
    updated_at: datetime
    author: Profile

    @classmethod
    def of(cls, comment: Comment, author: Profile) -> "CommentView":
        return cls(
            id=comment.id,
            article_slug=comment.article_slug,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=author,
        )
