"""
API Serializers Package.

Output serializers for the core's read projections. Input is not parsed with
serializers: validation belongs to the core use cases.
"""

from .user_serializers import UserSerializer, ProfileSerializer
from .article_serializers import ArticleSerializer, CommentSerializer


__all__ = [
    "UserSerializer",
    "ProfileSerializer",
    "ArticleSerializer",
    "CommentSerializer",
]
