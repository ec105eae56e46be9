"""Operations on persons associated with a connected account."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripekit import endpoints
from stripekit.models import DeletedObject, Person, PersonGender, PersonList
from stripekit.routes.base import RouteGroup, require_non_empty

logger = logging.getLogger(__name__)


def _person_params(
    *,
    address: Mapping[str, Any] | None,
    dob: Mapping[str, Any] | None,
    email: str | None,
    first_name: str | None,
    gender: PersonGender | str | None,
    id_number: str | None,
    last_name: str | None,
    maiden_name: str | None,
    metadata: Mapping[str, str] | None,
    phone: str | None,
    relationship: Mapping[str, Any] | None,
    ssn_last_4: str | None,
    verification: Mapping[str, Any] | None,
) -> dict[str, Any]:
    return {
        "address": address,
        "dob": dob,
        "email": email,
        "first_name": first_name,
        "gender": gender,
        "id_number": id_number,
        "last_name": last_name,
        "maiden_name": maiden_name,
        "metadata": metadata,
        "phone": phone,
        "relationship": relationship,
        "ssn_last_4": ssn_last_4,
        "verification": verification,
    }


@dataclass(frozen=True, slots=True)
class PersonRoutes(RouteGroup):
    async def create(
        self,
        account: str,
        *,
        address: Mapping[str, Any] | None = None,
        dob: Mapping[str, Any] | None = None,
        email: str | None = None,
        first_name: str | None = None,
        gender: PersonGender | str | None = None,
        id_number: str | None = None,
        last_name: str | None = None,
        maiden_name: str | None = None,
        metadata: Mapping[str, str] | None = None,
        phone: str | None = None,
        relationship: Mapping[str, Any] | None = None,
        ssn_last_4: str | None = None,
        verification: Mapping[str, Any] | None = None,
    ) -> Person:
        """Create a person on ``account``; all person fields are optional."""
        account_id = require_non_empty(account, "account")
        params = _person_params(
            address=address,
            dob=dob,
            email=email,
            first_name=first_name,
            gender=gender,
            id_number=id_number,
            last_name=last_name,
            maiden_name=maiden_name,
            metadata=metadata,
            phone=phone,
            relationship=relationship,
            ssn_last_4=ssn_last_4,
            verification=verification,
        )
        logger.debug("Creating person", extra={"account": account_id})
        return await self._post(endpoints.persons(account_id), Person, params)

    async def retrieve(self, account: str, person: str) -> Person:
        account_id = require_non_empty(account, "account")
        person_id = require_non_empty(person, "person")
        return await self._get(endpoints.person(account_id, person_id), Person)

    async def update(
        self,
        account: str,
        person: str,
        *,
        address: Mapping[str, Any] | None = None,
        dob: Mapping[str, Any] | None = None,
        email: str | None = None,
        first_name: str | None = None,
        gender: PersonGender | str | None = None,
        id_number: str | None = None,
        last_name: str | None = None,
        maiden_name: str | None = None,
        metadata: Mapping[str, str] | None = None,
        phone: str | None = None,
        relationship: Mapping[str, Any] | None = None,
        ssn_last_4: str | None = None,
        verification: Mapping[str, Any] | None = None,
    ) -> Person:
        """Update a person; omitted fields are left unchanged."""
        account_id = require_non_empty(account, "account")
        person_id = require_non_empty(person, "person")
        params = _person_params(
            address=address,
            dob=dob,
            email=email,
            first_name=first_name,
            gender=gender,
            id_number=id_number,
            last_name=last_name,
            maiden_name=maiden_name,
            metadata=metadata,
            phone=phone,
            relationship=relationship,
            ssn_last_4=ssn_last_4,
            verification=verification,
        )
        return await self._post(endpoints.person(account_id, person_id), Person, params)

    async def delete(self, account: str, person: str) -> DeletedObject:
        account_id = require_non_empty(account, "account")
        person_id = require_non_empty(person, "person")
        logger.debug("Deleting person", extra={"account": account_id, "person": person_id})
        return await self._delete(endpoints.person(account_id, person_id), DeletedObject)

    async def list_all(
        self,
        account: str,
        filter: Mapping[str, Any] | None = None,
    ) -> PersonList:
        account_id = require_non_empty(account, "account")
        return await self._get(endpoints.persons(account_id), PersonList, filter)
