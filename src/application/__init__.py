"""
Application layer - Use cases and orchestration for contract signature state.

This layer contains:
- Application services (signature reconciliation, state cache)
- Port definitions (abstract interfaces for infrastructure)
- DTOs returned to callers

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api (observability excepted)
"""
