# backend/urls.py
"""
Main URL configuration for the Conduit backend.
"""

from django.urls import path, include

from api.views.health import health

urlpatterns = [
    # API routes
    path('api/', include('api.urls')),

    # Monitoring
    path('health', health, name='health_check'),
]

# URL structure overview for frontend developers:
"""
Users:
- POST   /api/users                      - Register
- POST   /api/users/login                - Login
- GET    /api/user                       - Current user
- PUT    /api/user                       - Update current user

Profiles:
- GET    /api/profiles/<username>        - Profile
- POST   /api/profiles/<username>/follow - Follow
- DELETE /api/profiles/<username>/follow - Unfollow

Articles:
- POST   /api/articles                   - Create article
- POST   /api/articles/<slug>/comments   - Add comment

Monitoring:
- GET    /health                         - Liveness probe

Authenticated endpoints expect `Authorization: Token <jwt>` (Bearer also accepted).
"""
