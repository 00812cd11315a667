"""
In-Memory Store Implementation

Implements the persistence ports (UserRepository, ArticleRepository,
CommentRepository, FollowRepository) with plain dicts.

Characteristics:
- No persistence (records lost when the process exits)
- Thread-safe: each repository serializes its operations behind a Lock, and
  uniqueness checks happen under the same lock as the write, so colliding
  concurrent creates resolve with exactly one success
- Records are immutable dataclasses; callers never get a handle into the dicts

Usage:
    store = InMemoryStore()
    store.users.create(user)
    store.follows.add_edge(alice.id, bob.id)
"""

import itertools
import logging
from datetime import datetime
from threading import Lock
from typing import Dict, List, Set, Tuple

from apps.backend.core.domain import (
    Article,
    ArticlePatch,
    Comment,
    User,
    UserPatch,
)
from apps.backend.core.application.result import (
    Result,
    Success,
    conflict,
    not_found,
)


logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Implements UserRepository."""

    def __init__(self):
        self._by_id: Dict[str, User] = {}
        self._id_by_username: Dict[str, str] = {}
        self._id_by_email: Dict[str, str] = {}
        self._lock = Lock()

    def create(self, user: User) -> Result[User]:
        with self._lock:
            if user.id in self._by_id:
                return conflict("id")
            if user.username in self._id_by_username:
                return conflict("username")
            if user.email_key in self._id_by_email:
                return conflict("email")
            self._store(user)
        return Success(user)

    def find_by_id(self, user_id: str) -> Result[User]:
        with self._lock:
            user = self._by_id.get(user_id)
        return Success(user) if user is not None else not_found("user")

    def find_by_username(self, username: str) -> Result[User]:
        with self._lock:
            user = self._by_id.get(self._id_by_username.get(username, ""))
        return Success(user) if user is not None else not_found("profile")

    def find_by_email(self, email: str) -> Result[User]:
        with self._lock:
            user = self._by_id.get(self._id_by_email.get(email.lower(), ""))
        return Success(user) if user is not None else not_found("user")

    def update(self, user_id: str, patch: UserPatch) -> Result[User]:
        with self._lock:
            current = self._by_id.get(user_id)
            if current is None:
                return not_found("user")
            updated = current.apply(patch)

            owner = self._id_by_username.get(updated.username, user_id)
            if owner != user_id:
                return conflict("username")
            owner = self._id_by_email.get(updated.email_key, user_id)
            if owner != user_id:
                return conflict("email")

            del self._id_by_username[current.username]
            del self._id_by_email[current.email_key]
            self._store(updated)
        return Success(updated)

    def _store(self, user: User) -> None:
        self._by_id[user.id] = user
        self._id_by_username[user.username] = user.id
        self._id_by_email[user.email_key] = user.id

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)


class InMemoryArticleRepository:
    """Implements ArticleRepository. Slugs are unique keys."""

    def __init__(self):
        self._by_slug: Dict[str, Article] = {}
        self._lock = Lock()

    def create(self, article: Article) -> Result[Article]:
        with self._lock:
            if article.slug in self._by_slug:
                return conflict("slug")
            self._by_slug[article.slug] = article
        return Success(article)

    def find_by_slug(self, slug: str) -> Result[Article]:
        with self._lock:
            article = self._by_slug.get(slug)
        return Success(article) if article is not None else not_found("article")

    def update(self, slug: str, patch: ArticlePatch, timestamp: datetime) -> Result[Article]:
        with self._lock:
            current = self._by_slug.get(slug)
            if current is None:
                return not_found("article")
            updated = current.apply(patch, timestamp)
            self._by_slug[slug] = updated
        return Success(updated)

    def count(self) -> int:
        with self._lock:
            return len(self._by_slug)


class InMemoryCommentRepository:
    """Implements CommentRepository. Ids come from a counter starting at 1."""

    def __init__(self):
        self._by_id: Dict[int, Comment] = {}
        self._ids = itertools.count(1)
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def create(self, comment: Comment) -> Result[Comment]:
        with self._lock:
            if comment.id in self._by_id:
                return conflict("id")
            self._by_id[comment.id] = comment
        return Success(comment)

    def find_by_id(self, comment_id: int) -> Result[Comment]:
        with self._lock:
            comment = self._by_id.get(comment_id)
        return Success(comment) if comment is not None else not_found("comment")

    def find_by_article(self, article_slug: str) -> List[Comment]:
        with self._lock:
            comments = [c for c in self._by_id.values() if c.article_slug == article_slug]
        return sorted(comments, key=lambda c: c.id)


class InMemoryFollowRepository:
    """Implements FollowRepository as a set of (follower_id, followed_id) pairs."""

    def __init__(self):
        self._edges: Set[Tuple[str, str]] = set()
        self._lock = Lock()

    def add_edge(self, follower_id: str, followed_id: str) -> Result[None]:
        with self._lock:
            edge = (follower_id, followed_id)
            if edge in self._edges:
                return conflict("profile", "is already followed")
            self._edges.add(edge)
        return Success(None)

    def remove_edge(self, follower_id: str, followed_id: str) -> Result[None]:
        with self._lock:
            edge = (follower_id, followed_id)
            if edge not in self._edges:
                return not_found("profile", "is not followed")
            self._edges.remove(edge)
        return Success(None)

    def exists(self, follower_id: str, followed_id: str) -> bool:
        with self._lock:
            return (follower_id, followed_id) in self._edges


class InMemoryStore:
    """
    Explicit store object grouping the per-entity repositories.

    Injected into use cases by the composition root; swapping it for a
    durable backend does not touch use case code.
    """

    def __init__(self):
        self.users = InMemoryUserRepository()
        self.articles = InMemoryArticleRepository()
        self.comments = InMemoryCommentRepository()
        self.follows = InMemoryFollowRepository()
        logger.info("InMemoryStore initialized")
