# Models package init
"""
Importing this package registers every table with `Base.metadata`, so string
relationship targets ("Pet", "Owner") resolve regardless of import order.
"""

from petclinic.models.owner import Owner
from petclinic.models.pet import Pet, PetType
from petclinic.models.visit import Visit

__all__ = ["Owner", "Pet", "PetType", "Visit"]
