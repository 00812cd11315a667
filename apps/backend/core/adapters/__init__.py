"""
Adapters Layer - Concrete Implementations of Ports

This layer contains implementations of the ports defined in application/ports.py.

Structure:
- driven/: Outbound adapters (things the application USES)
  - persistence/: In-memory store (users, articles, comments, follows)
  - identity/: JWT token issuing and verification (simplejwt)
  - security/: Password hashing (django.contrib.auth.hashers)
  - time/: System clock

The inbound HTTP adapter lives in apps/backend/monolith/api/.

Key Principle: Adapters depend on ports, ports don't depend on adapters.
"""
