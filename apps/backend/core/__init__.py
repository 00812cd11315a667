"""
Conduit - Hexagonal Architecture Core

This package contains the framework-independent core of the blogging backend,
following the Ports & Adapters (Hexagonal) architecture pattern.

Structure:
- domain/: Pure business entities and value objects (NO framework dependencies)
- application/: Use cases, the Result pipeline, the authorization guard and port definitions
- adapters/: Concrete implementations of ports
  - driven/: Outbound adapters (in-memory store, JWT identity, password hashing, clock)
- wiring/: Dependency injection container

Key Principle: Dependencies point INWARD.
- Domain has ZERO external dependencies
- Application depends only on domain
- Adapters depend on application ports (but not vice versa)

The HTTP surface (Django REST Framework) lives in apps/backend/monolith/ and
only talks to the core through wiring/container.py.
"""

__version__ = "1.0.0"
