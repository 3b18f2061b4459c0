"""
PetClinic Backend - Owner Service (Controller Logic)
====================================================

What:  Decides, for every owner page, which view to render with which model,
       or where to redirect.
How:   Receives an OwnerRepository and a VisitRepository at construction and
       returns ModelAndView / Redirect values. Rendering them is the route's job.
Who:   Built per request by routes.owners.get_owner_service.

Search flow (GET /owners):
    ┌──────────────┐    ┌──────────────────┐    0 →  find form + "not found" on first_name
    │ first_name   │───▶│ find_by_first_   │───▶1 →  redirect /owners/{id}
    │ (None → "")  │    │ name (prefix)    │    n →  owners list with all selections
    └──────────────┘    └──────────────────┘

Update flow (POST /owners/{owner_id}/edit):
    bound values never contain "id" (see binding.py); the owner saved always
    carries the path id.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from petclinic.binding import BindingResult
from petclinic.exceptions import NotFoundError
from petclinic.models import Owner
from petclinic.repositories.base import OwnerRepository, VisitRepository
from petclinic.schemas.owner import OwnerDetails, PetDetails, VisitResponse

logger = logging.getLogger(__name__)

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/create_or_update_owner_form"
VIEWS_FIND_OWNERS = "owners/find_owners"
VIEWS_OWNERS_LIST = "owners/owners_list"
VIEWS_OWNER_DETAILS = "owners/owner_details"

OWNER_FORM_FIELDS = ("first_name", "last_name", "address", "city", "telephone")


@dataclass(frozen=True)
class ModelAndView:
    """A template name (without extension) and the values it renders."""

    view_name: str
    model: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    location: str


ViewResult = Union[ModelAndView, Redirect]


def owner_form_values(owner: Optional[Owner] = None) -> Dict[str, Any]:
    """Form model for an owner; blank values for a new one."""
    values: Dict[str, Any] = {name: "" for name in OWNER_FORM_FIELDS}
    values["id"] = None
    if owner is not None:
        for name in OWNER_FORM_FIELDS:
            values[name] = getattr(owner, name) or ""
        values["id"] = owner.id
    return values


class OwnerService:
    """
    Owner pages: create, find, edit, show.

    Stateless apart from its two repositories; one instance per request.
    """

    def __init__(self, owners: OwnerRepository, visits: VisitRepository):
        self.owners = owners
        self.visits = visits

    # ── Create ────────────────────────────────────────────────────────────

    def init_creation_form(self) -> ModelAndView:
        return ModelAndView(
            VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
            {"owner": owner_form_values(), "binding": BindingResult(object_name="owner")},
        )

    async def process_creation_form(self, binding: BindingResult) -> ViewResult:
        """
        Persist a new owner, or redisplay the form with its errors.

        Returns:
            Redirect to /owners/{new_id} on success
        """
        if binding.has_errors:
            return ModelAndView(
                VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
                {"owner": {**binding.target, "id": None}, "binding": binding},
            )

        owner = await self.owners.save(Owner(**binding.target))
        logger.info("Created owner %s", owner.id)
        return Redirect(f"/owners/{owner.id}")

    # ── Find ──────────────────────────────────────────────────────────────

    def init_find_form(self) -> ModelAndView:
        return ModelAndView(
            VIEWS_FIND_OWNERS,
            {"owner": {"first_name": ""}, "binding": BindingResult(object_name="owner")},
        )

    async def process_find_form(self, first_name: Optional[str]) -> ViewResult:
        """
        Search owners by first name and branch on how many match.

        Args:
            first_name: Filter from the query string; None (parameterless
                        GET /owners) is treated as "" which matches everyone.
        """
        if first_name is None:
            first_name = ""

        results = await self.owners.find_by_first_name(first_name)

        if not results:
            binding = BindingResult(object_name="owner", target={"first_name": first_name})
            binding.reject_value("first_name", "notFound", "not found")
            return ModelAndView(VIEWS_FIND_OWNERS, {"owner": binding.target, "binding": binding})

        if len(results) == 1:
            return Redirect(f"/owners/{results[0].id}")

        return ModelAndView(VIEWS_OWNERS_LIST, {"selections": results})

    # ── Edit ──────────────────────────────────────────────────────────────

    async def init_update_owner_form(self, owner_id: int) -> ModelAndView:
        owner = await self._load_owner(owner_id)
        return ModelAndView(
            VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
            {"owner": owner_form_values(owner), "binding": BindingResult(object_name="owner")},
        )

    async def process_update_owner_form(self, binding: BindingResult, owner_id: int) -> ViewResult:
        """
        Save edited contact details under the path identity.

        Any "id" the client submitted was dropped during binding; the id
        assigned here is always `owner_id`.
        """
        if binding.has_errors:
            return ModelAndView(
                VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
                {"owner": {**binding.target, "id": owner_id}, "binding": binding},
            )

        await self._load_owner(owner_id)

        owner = Owner(**binding.target)
        owner.id = owner_id
        await self.owners.save(owner)
        logger.info("Updated owner %s", owner_id)
        return Redirect(f"/owners/{owner_id}")

    # ── Show ──────────────────────────────────────────────────────────────

    async def show_owner(self, owner_id: int) -> ModelAndView:
        """
        Owner detail page: every pet with its own visit history.

        Visits are fetched per pet here rather than mapped on Pet.
        """
        owner = await self._load_owner(owner_id)

        pets = []
        for pet in owner.pets:
            visits = await self.visits.find_by_pet_id(pet.id)
            pets.append(
                PetDetails(
                    id=pet.id,
                    name=pet.name,
                    birth_date=pet.birth_date,
                    type=pet.type.name if pet.type is not None else None,
                    visits=[VisitResponse.model_validate(visit) for visit in visits],
                )
            )

        details = OwnerDetails(
            id=owner.id,
            first_name=owner.first_name,
            last_name=owner.last_name,
            address=owner.address,
            city=owner.city,
            telephone=owner.telephone,
            pets=pets,
        )
        return ModelAndView(VIEWS_OWNER_DETAILS, {"owner": details})

    async def _load_owner(self, owner_id: int) -> Owner:
        owner = await self.owners.find_by_id(owner_id)
        if owner is None:
            raise NotFoundError(resource="owner", resource_id=str(owner_id))
        return owner
