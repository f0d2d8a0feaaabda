"""
API layer - FastAPI routes and HTTP concerns for contract signature state.

This layer contains:
- FastAPI route definitions
- Request/Response models
- HTTP middleware

IMPORT RULES:
- CAN import from: application, bootstrap
- CANNOT import from: infrastructure directly (middleware excepted)
"""

__all__: list[str] = []
