"""
API Views Package.

Function-based DRF views. Each view resolves the caller through the core
AuthorizationGuard (when the endpoint needs an identity), builds a command,
runs one use case from the wiring container and renders the Result.
"""

from . import users
from . import profiles
from . import articles
from . import health
