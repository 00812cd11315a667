"""
Article Use Cases

create-article and add-comment-to-article. Both act on behalf of an
identity resolved by the AuthorizationGuard; the author id always comes
from that identity, never from the request payload.
"""

import itertools
import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from apps.backend.core.domain import (
    Article,
    ArticleView,
    Comment,
    CommentView,
    User,
    disambiguate,
    slugify,
    unique_tags,
)
from apps.backend.core.application.ports import (
    ArticleRepository,
    ClockPort,
    CommentRepository,
    Identity,
    UserRepository,
)
from apps.backend.core.application.result import (
    FailureKind,
    FieldErrors,
    Result,
    Success,
    flow,
)
from apps.backend.core.application.user_use_cases import require_identity
from apps.backend.core.application.validation import (
    TITLE_MAX_LENGTH,
    check_optional_text,
    check_required_text,
    check_tag_list,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateArticleCommand:
    title: Any = None
    description: Any = None
    body: Any = None
    tag_list: Any = None


@dataclass(frozen=True)
class AddCommentCommand:
    article_slug: str
    body: Any = None


@dataclass(frozen=True)
class _ArticleDraft:
    base_slug: str
    title: str
    description: str
    body: str
    tag_list: tuple[str, ...]
    author: Optional[User] = None


# ============================================================================
# Create Article
# ============================================================================

class CreateArticleUseCase:
    """
    Publish an article for the acting user.

    This use case:
    1. Validates title/body (required), description and tagList (optional)
    2. Derives the slug from the title
    3. Loads the author (for the embedded profile)
    4. Persists the article, appending -2, -3, ... to the slug while the
       repository reports a slug Conflict
    5. Projects the article with the author's profile

    Slug disambiguation relies on ArticleRepository.create being atomic, so two
    concurrent articles with the same title still end up with distinct slugs.
    """

    def __init__(
        self,
        articles: ArticleRepository,
        users: UserRepository,
        clock: ClockPort,
    ):
        self._articles = articles
        self._users = users
        self._clock = clock

    def execute(
        self,
        identity: Optional[Identity],
        command: CreateArticleCommand,
    ) -> Result[ArticleView]:
        authorized = require_identity(identity)
        if not authorized.is_success:
            return authorized
        author_id = authorized.value.user_id

        result = flow(
            command,
            self._validate,
            lambda draft: self._users.find_by_id(author_id).map(
                lambda author: replace(draft, author=author)
            ),
            self._persist,
        )
        if result.is_success:
            logger.info(f"Article {result.value.slug} created by {author_id}")
        else:
            logger.info(f"Article creation by {author_id} rejected ({result.kind.value}): {result.messages}")
        return result

    def _validate(self, command: CreateArticleCommand) -> Result[_ArticleDraft]:
        errors = FieldErrors()
        title = check_required_text(errors, "title", command.title)
        body = check_required_text(errors, "body", command.body)
        description = check_optional_text(errors, "description", command.description)
        tags = check_tag_list(errors, command.tag_list)

        base_slug = ""
        if title is not None:
            if len(title) > TITLE_MAX_LENGTH:
                errors.add("title", f"is too long (maximum is {TITLE_MAX_LENGTH} characters)")
            base_slug = slugify(title)
            if not base_slug:
                errors.add("title", "must contain at least one letter or digit")

        if errors:
            return errors.to_failure()

        return Success(_ArticleDraft(
            base_slug=base_slug,
            title=title,
            description=description if isinstance(description, str) else "",
            body=body,
            tag_list=unique_tags(tags),
        ))

    def _persist(self, draft: _ArticleDraft) -> Result[ArticleView]:
        now = self._clock.now()
        for attempt in itertools.count(1):
            article = Article(
                slug=disambiguate(draft.base_slug, attempt),
                title=draft.title,
                description=draft.description,
                body=draft.body,
                author_id=draft.author.id,
                created_at=now,
                updated_at=now,
                tag_list=draft.tag_list,
                favorites_count=0,
            )
            created = self._articles.create(article)
            if created.is_success:
                return Success(ArticleView.of(created.value, draft.author.profile(following=False)))
            if created.kind != FailureKind.CONFLICT:
                return created
            logger.debug(f"Slug {article.slug} taken, trying next discriminator")


# ============================================================================
# Add Comment
# ============================================================================

class AddCommentToArticleUseCase:
    """
    Comment on an existing article as the acting user.

    Fails ValidationError for an empty body and NotFound when the slug does
    not resolve to an article.
    """

    def __init__(
        self,
        articles: ArticleRepository,
        comments: CommentRepository,
        users: UserRepository,
        clock: ClockPort,
    ):
        self._articles = articles
        self._comments = comments
        self._users = users
        self._clock = clock

    def execute(
        self,
        identity: Optional[Identity],
        command: AddCommentCommand,
    ) -> Result[CommentView]:
        authorized = require_identity(identity)
        if not authorized.is_success:
            return authorized
        author_id = authorized.value.user_id

        result = flow(
            command,
            self._validate,
            lambda body: self._articles.find_by_slug(command.article_slug).map(lambda article: body),
            lambda body: self._users.find_by_id(author_id).map(lambda author: (body, author)),
            lambda pair: self._persist(command.article_slug, *pair),
        )
        if result.is_success:
            logger.info(f"Comment {result.value.id} added to {command.article_slug} by {author_id}")
        else:
            logger.info(f"Comment on {command.article_slug} rejected ({result.kind.value}): {result.messages}")
        return result

    def _validate(self, command: AddCommentCommand) -> Result[str]:
        errors = FieldErrors()
        body = check_required_text(errors, "body", command.body)
        return errors.result(body)

    def _persist(self, article_slug: str, body: str, author: User) -> Result[CommentView]:
        now = self._clock.now()
        comment = Comment(
            id=self._comments.next_id(),
            article_slug=article_slug,
            author_id=author.id,
            body=body,
            created_at=now,
            updated_at=now,
        )
        return self._comments.create(comment).map(
            lambda saved: CommentView.of(saved, author.profile(following=False))
        )
