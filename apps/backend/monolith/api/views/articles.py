# api/views/articles.py
"""
Article endpoints.

POST /api/articles                  - create article (token required)
POST /api/articles/<slug>/comments  - comment on an article (token required)
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework import status

from apps.backend.core.application.article_use_cases import (
    AddCommentCommand,
    CreateArticleCommand,
)
from apps.backend.core.wiring import container
from api.serializers import ArticleSerializer, CommentSerializer
from .base import get_credential, get_payload, render, render_failure


@api_view(['POST'])
@permission_classes([AllowAny])
def create_article(request):
    """
    Body: {"article": {"title", "description", "body", "tagList"}}

    The author is the token's identity; an authorID in the body is ignored.

    Returns:
        201 Created: {"article": {...}}
        401 Unauthorized: missing or invalid token
        422 Unprocessable Entity: validation error
    """
    identity = container.get_guard().authenticate(get_credential(request))
    if not identity.is_success:
        return render_failure(identity)

    payload = get_payload(request, 'article')
    command = CreateArticleCommand(
        title=payload.get('title'),
        description=payload.get('description'),
        body=payload.get('body'),
        tag_list=payload.get('tagList'),
    )
    result = container.get_create_article_uc().execute(identity.value, command)
    return render(result, 'article', ArticleSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def add_comment(request, slug):
    """
    Body: {"comment": {"body": ...}}

    Returns:
        201 Created: {"comment": {...}}
        401 Unauthorized: missing or invalid token
        404 Not Found: no article with this slug
        422 Unprocessable Entity: empty body
    """
    identity = container.get_guard().authenticate(get_credential(request))
    if not identity.is_success:
        return render_failure(identity)

    payload = get_payload(request, 'comment')
    command = AddCommentCommand(article_slug=slug, body=payload.get('body'))
    result = container.get_add_comment_uc().execute(identity.value, command)
    return render(result, 'comment', CommentSerializer, success_status=status.HTTP_201_CREATED)
