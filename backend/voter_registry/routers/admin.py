"""
Admin router: signup decisions and the constituency dashboard.
"""
from fastapi import APIRouter, Depends

from voter_registry.dependencies.roles import require_admin
from voter_registry.dependencies.services import get_registrant_service
from voter_registry.models.registrant import ApprovalStatus
from voter_registry.models.session import SessionSnapshot
from voter_registry.schemas.auth import (
    DashboardResponse,
    DecisionRequest,
    DecisionResponse,
    RegistrantResponse,
)
from voter_registry.services.registrant_service import RegistrantService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/accept",
    response_model=DecisionResponse,
    summary="Accept a signup request",
)
async def accept_user(
    body: DecisionRequest,
    admin: SessionSnapshot = Depends(require_admin()),
    registrants: RegistrantService = Depends(get_registrant_service),
):
    """
    Accept a pending registrant and provision their voter partition.

    Admin accounts cannot be accepted or refused through this endpoint.
    """
    registrant = await registrants.approve(body.username)
    return DecisionResponse(
        message="User accepted successfully",
        user=RegistrantResponse.from_registrant(registrant),
    )


@router.post(
    "/refuse",
    response_model=DecisionResponse,
    summary="Refuse a signup request",
)
async def refuse_user(
    body: DecisionRequest,
    admin: SessionSnapshot = Depends(require_admin()),
    registrants: RegistrantService = Depends(get_registrant_service),
):
    """Refuse a pending registrant."""
    registrant = await registrants.reject(body.username)
    return DecisionResponse(
        message="User refused successfully",
        user=RegistrantResponse.from_registrant(registrant),
    )


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Pending and accepted registrants",
)
async def dashboard(
    admin: SessionSnapshot = Depends(require_admin()),
    registrants: RegistrantService = Depends(get_registrant_service),
):
    """Non-admin registrants of the admin's own constituency."""
    pending = await registrants.list_by_constituency_and_status(
        admin.constituency, ApprovalStatus.PENDING
    )
    accepted = await registrants.list_by_constituency_and_status(
        admin.constituency, ApprovalStatus.ACCEPTED
    )
    return DashboardResponse(
        pendingUsers=[RegistrantResponse.from_registrant(r) for r in pending],
        acceptedUsers=[RegistrantResponse.from_registrant(r) for r in accepted],
    )
