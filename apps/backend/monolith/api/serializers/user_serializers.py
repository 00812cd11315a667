# api/serializers/user_serializers.py
from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Renders an AuthenticatedUser projection."""
    email = serializers.CharField()
    token = serializers.CharField()
    username = serializers.CharField()
    bio = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_null=True)


class ProfileSerializer(serializers.Serializer):
    """Renders a viewer-relative Profile."""
    username = serializers.CharField()
    bio = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_null=True)
    following = serializers.BooleanField()
