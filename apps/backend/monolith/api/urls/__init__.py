# api/urls/__init__.py
"""
Conduit API routes (mounted under /api/).

Paths have no trailing slash (APPEND_SLASH is off).
"""

from django.urls import path

from ..views import articles, profiles, users

urlpatterns = [
    # ==========================================
    # USERS
    # ==========================================
    path('users', users.register, name='user_register'),
    path('users/login', users.login, name='user_login'),
    path('user', users.current_user, name='current_user'),

    # ==========================================
    # PROFILES
    # ==========================================
    path('profiles/<str:username>', profiles.get_profile, name='profile_detail'),
    path('profiles/<str:username>/follow', profiles.follow, name='profile_follow'),

    # ==========================================
    # ARTICLES
    # ==========================================
    path('articles', articles.create_article, name='article_create'),
    path('articles/<str:slug>/comments', articles.add_comment, name='article_comment_add'),
]
