"""
Voters router: CRUD over the caller's own voter partition.
"""
import re
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from voter_registry.dependencies.auth import CurrentSession
from voter_registry.dependencies.roles import require_admin, require_admin_or_authority
from voter_registry.dependencies.services import get_voter_service
from voter_registry.models.session import SessionSnapshot
from voter_registry.models.voter import VoterRecord
from voter_registry.schemas.auth import MessageResponse
from voter_registry.schemas.voter import (
    VoterCreate,
    VoterCreatedResponse,
    VoterPage,
    VoterUpdate,
    VoterUpdatedResponse,
)
from voter_registry.services.voter_service import VoterService

router = APIRouter(prefix="/voters", tags=["Voters"])

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
LEADING_INT = re.compile(r"\s*[+-]?\d+")


def coerce_positive_int(value: Optional[str], default: int) -> int:
    """
    Parse the leading integer of a query value ("3abc" and "3.5" give 3).

    Anything without a leading integer, or below 1, gives ``default``.
    """
    match = LEADING_INT.match(value or "")
    if not match:
        return default
    parsed = int(match.group(0))
    return parsed if parsed >= 1 else default


@router.post(
    "",
    response_model=VoterCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add voter",
)
async def create_voter(
    body: VoterCreate,
    admin: SessionSnapshot = Depends(require_admin()),
    voters: VoterService = Depends(get_voter_service),
):
    """Add a voter to the admin's own partition. All fields are optional."""
    voter = await voters.create(admin.username, body)
    return VoterCreatedResponse(message="Voter added successfully", voter=voter)


@router.get(
    "",
    response_model=VoterPage,
    summary="List voters",
)
async def list_voters(
    session: CurrentSession,
    page: Optional[str] = Query(None, description="Page number (default: 1)"),
    limit: Optional[str] = Query(None, description="Items per page (default: 10)"),
    voters: VoterService = Depends(get_voter_service),
):
    """
    Paginated voters of the caller's own partition.

    Missing, non-numeric or non-positive `page`/`limit` values fall back to
    their defaults.
    """
    return await voters.list_paged(
        session.username,
        page=coerce_positive_int(page, DEFAULT_PAGE),
        limit=coerce_positive_int(limit, DEFAULT_LIMIT),
    )


@router.get(
    "/{voter_id}",
    response_model=VoterRecord,
    summary="Get voter",
)
async def get_voter(
    voter_id: str,
    session: CurrentSession,
    voters: VoterService = Depends(get_voter_service),
):
    """Fetch one voter by key. 400 for a malformed key, 404 if absent."""
    return await voters.get_by_id(session.username, voter_id)


@router.put(
    "/{voter_id}",
    response_model=VoterUpdatedResponse,
    summary="Update voter",
)
async def update_voter(
    voter_id: str,
    body: VoterUpdate,
    session: SessionSnapshot = Depends(require_admin_or_authority()),
    voters: VoterService = Depends(get_voter_service),
):
    """
    Update the given fields of a voter; omitted fields are kept.

    Admins and authorities only.
    """
    voter = await voters.update_by_id(session.username, voter_id, body)
    return VoterUpdatedResponse(voter=voter)


@router.delete(
    "/{voter_id}",
    response_model=MessageResponse,
    summary="Delete voter",
)
async def delete_voter(
    voter_id: str,
    admin: SessionSnapshot = Depends(require_admin()),
    voters: VoterService = Depends(get_voter_service),
):
    """Delete a voter from the admin's own partition."""
    await voters.delete_by_id(admin.username, voter_id)
    return MessageResponse(message="Voter deleted successfully")
