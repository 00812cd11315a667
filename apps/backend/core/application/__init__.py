"""
Application Layer - Use Cases and Ports

This layer contains:
- Use case implementations (user_use_cases.py, article_use_cases.py)
- The Result pipeline shared by every use case (result.py)
- Input validation rules (validation.py)
- The AuthorizationGuard (auth_guard.py)
- Port definitions (interfaces for external dependencies)

NO framework dependencies allowed (pure Python).
"""
