"""
Tests for InMemoryStore repositories.

Run with: pytest apps/backend/core/tests/test_in_memory_store.py -v
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from apps.backend.core.adapters.driven.persistence.in_memory import InMemoryStore
from apps.backend.core.application.result import FailureKind
from apps.backend.core.domain import Article, ArticlePatch, Comment, User, UserPatch


NOW = datetime(2025, 12, 23, 12, 0, 0, tzinfo=timezone.utc)


def make_user(user_id: str, username: str, email: str) -> User:
    return User(id=user_id, email=email, username=username, password_hash="hashed$pw")


def make_article(slug: str) -> Article:
    return Article(
        slug=slug,
        title="Hello World",
        description="",
        body="Body",
        author_id="u-1",
        created_at=NOW,
        updated_at=NOW,
    )


class TestInMemoryUserRepository:
    def test_create_and_find(self):
        store = InMemoryStore()
        alice = make_user("u-1", "alice", "alice@example.com")

        assert store.users.create(alice).is_success

        assert store.users.find_by_id("u-1").value == alice
        assert store.users.find_by_username("alice").value == alice
        assert store.users.find_by_email("ALICE@example.com").value == alice

    def test_username_is_unique(self):
        store = InMemoryStore()
        store.users.create(make_user("u-1", "alice", "alice@example.com"))

        result = store.users.create(make_user("u-2", "alice", "other@example.com"))

        assert result.kind == FailureKind.CONFLICT
        assert "username" in result.errors
        assert store.users.count() == 1

    def test_email_is_unique_case_insensitively(self):
        store = InMemoryStore()
        store.users.create(make_user("u-1", "alice", "alice@example.com"))

        result = store.users.create(make_user("u-2", "bob", "Alice@Example.COM"))

        assert result.kind == FailureKind.CONFLICT
        assert "email" in result.errors

    def test_unknown_lookups_are_not_found(self):
        store = InMemoryStore()

        assert store.users.find_by_id("missing").kind == FailureKind.NOT_FOUND
        assert store.users.find_by_username("missing").kind == FailureKind.NOT_FOUND
        assert store.users.find_by_email("missing@example.com").kind == FailureKind.NOT_FOUND

    def test_update_reindexes_username_and_email(self):
        store = InMemoryStore()
        store.users.create(make_user("u-1", "alice", "alice@example.com"))

        updated = store.users.update("u-1", UserPatch(username="alicia", email="alicia@example.com"))

        assert updated.is_success
        assert store.users.find_by_username("alice").kind == FailureKind.NOT_FOUND
        assert store.users.find_by_email("alice@example.com").kind == FailureKind.NOT_FOUND
        assert store.users.find_by_username("alicia").value.id == "u-1"
        assert store.users.find_by_email("alicia@example.com").value.id == "u-1"

    def test_update_keeping_own_username_is_allowed(self):
        store = InMemoryStore()
        store.users.create(make_user("u-1", "alice", "alice@example.com"))

        result = store.users.update("u-1", UserPatch(username="alice", bio="hi"))

        assert result.is_success
        assert result.value.bio == "hi"

    def test_update_to_taken_username_conflicts_and_changes_nothing(self):
        store = InMemoryStore()
        store.users.create(make_user("u-1", "alice", "alice@example.com"))
        store.users.create(make_user("u-2", "bob", "bob@example.com"))

        result = store.users.update("u-2", UserPatch(username="alice", bio="changed"))

        assert result.kind == FailureKind.CONFLICT
        assert store.users.find_by_id("u-2").value.bio == ""
        assert store.users.find_by_username("bob").value.id == "u-2"

    def test_update_unknown_user(self):
        store = InMemoryStore()

        assert store.users.update("missing", UserPatch(bio="x")).kind == FailureKind.NOT_FOUND

    def test_concurrent_registrations_with_same_username(self):
        """Exactly one of many colliding creates wins."""
        store = InMemoryStore()
        users = [make_user(f"u-{i}", "alice", f"alice{i}@example.com") for i in range(20)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(store.users.create, users))

        assert sum(1 for r in results if r.is_success) == 1
        assert store.users.count() == 1


class TestInMemoryArticleRepository:
    def test_slug_is_unique(self):
        store = InMemoryStore()
        assert store.articles.create(make_article("hello-world")).is_success

        result = store.articles.create(make_article("hello-world"))

        assert result.kind == FailureKind.CONFLICT
        assert store.articles.count() == 1

    def test_find_unknown_slug(self):
        store = InMemoryStore()

        result = store.articles.find_by_slug("nope")

        assert result.kind == FailureKind.NOT_FOUND
        assert "article" in result.errors

    def test_update(self):
        store = InMemoryStore()
        store.articles.create(make_article("hello-world"))
        later = datetime(2025, 12, 24, tzinfo=timezone.utc)

        result = store.articles.update("hello-world", ArticlePatch(title="Hello Again"), later)

        assert result.value.title == "Hello Again"
        assert store.articles.find_by_slug("hello-world").value.updated_at == later


class TestInMemoryCommentRepository:
    def test_ids_are_sequential_and_never_reused(self):
        store = InMemoryStore()

        ids = [store.comments.next_id() for _ in range(3)]

        assert ids == [1, 2, 3]

    def test_find_by_article_orders_by_id(self):
        store = InMemoryStore()
        for slug in ("a", "b", "a"):
            store.comments.create(Comment(
                id=store.comments.next_id(),
                article_slug=slug,
                author_id="u-1",
                body="text",
                created_at=NOW,
            ))

        comments = store.comments.find_by_article("a")

        assert [c.id for c in comments] == [1, 3]
        assert store.comments.find_by_id(2).value.article_slug == "b"
        assert store.comments.find_by_id(99).kind == FailureKind.NOT_FOUND


class TestInMemoryFollowRepository:
    def test_add_exists_remove(self):
        store = InMemoryStore()

        assert store.follows.add_edge("u-1", "u-2").is_success
        assert store.follows.exists("u-1", "u-2")
        assert not store.follows.exists("u-2", "u-1")

        assert store.follows.remove_edge("u-1", "u-2").is_success
        assert not store.follows.exists("u-1", "u-2")

    def test_duplicate_edge_conflicts(self):
        store = InMemoryStore()
        store.follows.add_edge("u-1", "u-2")

        assert store.follows.add_edge("u-1", "u-2").kind == FailureKind.CONFLICT

    def test_removing_missing_edge_is_not_found(self):
        store = InMemoryStore()

        assert store.follows.remove_edge("u-1", "u-2").kind == FailureKind.NOT_FOUND
