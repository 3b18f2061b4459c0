"""
PetClinic Backend - Owner Route Handlers
========================================

What:  HTML pages for creating, finding, editing and showing owners.
How:   Each handler reads the path/query/form, calls OwnerService, and
       renders the returned view or redirect.

Route Inventory:
    GET  /owners/new               blank creation form
    POST /owners/new               submit new owner
    GET  /owners/find              search form
    GET  /owners                   run search (?first_name=)
    GET  /owners/{owner_id}/edit   pre-populated edit form
    POST /owners/{owner_id}/edit   submit edited owner
    GET  /owners/{owner_id}        owner details with pets and visits

The static paths (/owners/new, /owners/find) are registered before
/owners/{owner_id}.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from petclinic.binding import bind_owner
from petclinic.database import get_db_session
from petclinic.repositories import SqlAlchemyOwnerRepository, SqlAlchemyVisitRepository
from petclinic.services.owner_service import OwnerService
from petclinic.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["Owners"], default_response_class=HTMLResponse)


def get_owner_service(db: AsyncSession = Depends(get_db_session)) -> OwnerService:
    """Per-request OwnerService over the request's database session."""
    return OwnerService(
        owners=SqlAlchemyOwnerRepository(db),
        visits=SqlAlchemyVisitRepository(db),
    )


@router.get("/new", summary="Blank owner creation form")
async def init_creation_form(
    request: Request,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    return render(request, service.init_creation_form())


@router.post("/new", summary="Create an owner")
async def process_creation_form(
    request: Request,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    """
    Create an owner from the submitted form.

    Responses:
        302 → /owners/{id} on success
        200 → the form again, with field errors, when validation fails
    """
    binding = bind_owner(await request.form())
    if binding.has_errors:
        logger.info("Owner creation rejected: %d field error(s)", len(binding.errors))
    return render(request, await service.process_creation_form(binding))


@router.get("/find", summary="Owner search form")
async def init_find_form(
    request: Request,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    return render(request, service.init_find_form())


@router.get("", summary="Search owners by first name")
async def process_find_form(
    request: Request,
    first_name: Optional[str] = Query(
        default=None,
        description="First-name prefix. Omit or leave empty to list every owner.",
    ),
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    return render(request, await service.process_find_form(first_name))


@router.get("/{owner_id}/edit", summary="Owner edit form")
async def init_update_owner_form(
    request: Request,
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    return render(request, await service.init_update_owner_form(owner_id))


@router.post("/{owner_id}/edit", summary="Update an owner")
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    """
    Update an owner. The identity is the path parameter; any "id" in the
    form body is ignored.
    """
    binding = bind_owner(await request.form())
    return render(request, await service.process_update_owner_form(binding, owner_id))


@router.get("/{owner_id}", summary="Owner details")
async def show_owner(
    request: Request,
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
) -> Response:
    return render(request, await service.show_owner(owner_id))
