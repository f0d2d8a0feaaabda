"""
API routes for contract signature state.

Available routers:
- signatures: Signature state, edit gate and signature mutations
"""

from src.api.routes.signatures import router as signatures_router

__all__: list[str] = ["signatures_router"]
