"""Contract signature endpoints.

Exposes the signature state service to the contract editor and the
signing flow.

Endpoints:
- GET    /v1/contracts/{contract_id}/signatures              resolved state
- GET    /v1/contracts/{contract_id}/edit-gate               edit decision
- PUT    /v1/contracts/{contract_id}/signatures/{role}       save signature
- DELETE /v1/contracts/{contract_id}/signatures/{role}       remove signature
- POST   /v1/contracts/{contract_id}/signatures/invalidate   drop cached state
- POST   /v1/signatures/cache/clear                          drop all cached state

Reads always answer 200: remote store failures degrade to the mirror or
to the unsigned state. Mutations the remote store rejected answer 502 so
the caller never assumes a signature was recorded.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from src.api.dependencies.signatures import get_signature_service
from src.api.models.signatures import (
    EditGateResponse,
    SaveSignatureRequest,
    SignatureMutationResponse,
    SignatureStateResponse,
)
from src.application.dtos.signature import SignatureMutationResult
from src.application.services.signature_state_service import SignatureStateService
from src.domain.models.signature import SignatureRole

router = APIRouter(prefix="/v1", tags=["signatures"])


@router.get(
    "/contracts/{contract_id}/signatures",
    response_model=SignatureStateResponse,
    summary="Get contract signature state",
)
async def get_signature_state(
    contract_id: str,
    service: SignatureStateService = Depends(get_signature_service),
) -> SignatureStateResponse:
    """Return the resolved designer/client signature state."""
    state = await service.get_signature_state(contract_id)
    return SignatureStateResponse.from_state(contract_id, state)


@router.get(
    "/contracts/{contract_id}/edit-gate",
    response_model=EditGateResponse,
    summary="Check whether a contract may be edited",
)
async def get_edit_gate(
    contract_id: str,
    service: SignatureStateService = Depends(get_signature_service),
) -> EditGateResponse:
    """Return the edit decision. Only the designer signature locks editing."""
    result = await service.can_edit_contract(contract_id)
    return EditGateResponse(
        can_edit=result.can_edit,
        reason=result.reason,
        signature_state=SignatureStateResponse.from_state(
            contract_id, result.signature_state
        ),
    )


@router.put(
    "/contracts/{contract_id}/signatures/{role}",
    response_model=SignatureMutationResponse,
    summary="Record a signature",
    responses={502: {"description": "Remote signature store rejected the write"}},
)
async def save_signature(
    contract_id: str,
    role: SignatureRole,
    body: SaveSignatureRequest,
    request: Request,
    service: SignatureStateService = Depends(get_signature_service),
) -> SignatureMutationResponse:
    """Record one party's signature on a contract."""
    result = await service.save_signature(contract_id, role, body.payload)
    return _mutation_response(result, request)


@router.delete(
    "/contracts/{contract_id}/signatures/{role}",
    response_model=SignatureMutationResponse,
    summary="Remove a signature",
    responses={502: {"description": "Remote signature store rejected the delete"}},
)
async def remove_signature(
    contract_id: str,
    role: SignatureRole,
    request: Request,
    service: SignatureStateService = Depends(get_signature_service),
) -> SignatureMutationResponse:
    """Remove one party's signature from a contract."""
    result = await service.remove_signature(contract_id, role)
    return _mutation_response(result, request)


@router.post(
    "/contracts/{contract_id}/signatures/invalidate",
    status_code=204,
    summary="Invalidate cached signature state for a contract",
)
async def invalidate_signature_cache(
    contract_id: str,
    service: SignatureStateService = Depends(get_signature_service),
) -> Response:
    """Force the next read of this contract to bypass the cache."""
    service.invalidate_cache(contract_id)
    return Response(status_code=204)


@router.post(
    "/signatures/cache/clear",
    status_code=204,
    summary="Clear all cached signature state",
)
async def clear_signature_cache(
    service: SignatureStateService = Depends(get_signature_service),
) -> Response:
    """Drop every cached signature state in this process."""
    service.clear_cache()
    return Response(status_code=204)


def _mutation_response(
    result: SignatureMutationResult, request: Request
) -> SignatureMutationResponse:
    if not result.success:
        raise HTTPException(
            status_code=502,
            detail={
                "type": "urn:contract-signature:store:write-failed",
                "title": "Signature Not Recorded",
                "status": 502,
                "detail": result.error,
                "instance": str(request.url),
            },
        )
    return SignatureMutationResponse(success=True)
