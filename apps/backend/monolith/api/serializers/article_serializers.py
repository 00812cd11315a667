# api/serializers/article_serializers.py
from rest_framework import serializers

from .user_serializers import ProfileSerializer


class ArticleSerializer(serializers.Serializer):
    """Renders an ArticleView with camelCase keys."""
    slug = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    body = serializers.CharField()
    tagList = serializers.ListField(source='tag_list', child=serializers.CharField())
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')
    favorited = serializers.BooleanField()
    favoritesCount = serializers.IntegerField(source='favorites_count')
    author = ProfileSerializer()


class CommentSerializer(serializers.Serializer):
    """Renders a CommentView with camelCase keys."""
    id = serializers.IntegerField()
    articleSlug = serializers.CharField(source='article_slug')
    body = serializers.CharField()
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')
    author = ProfileSerializer()
