"""Module: records."""

from __future__ import annotations

import logging

from sqlalchemy import Select, delete, insert, select, update

from petrecords.db.gateway import Gateway
from petrecords.db.models.owner import Owner
from petrecords.db.models.pet import Pet
from petrecords.db.models.pet_type import PetType
from petrecords.schemas.pet import PetForm, SearchParams

logger = logging.getLogger(__name__)


# -------------------------
# Reads
# -------------------------
def _pet_listing() -> Select:
    return (
        select(
            Pet.pet_id.label("pet_id"),
            Pet.pet_name.label("pet_name"),
            Pet.age.label("age"),
            Pet.owner_id.label("owner_id"),
            Pet.type_id.label("type_id"),
            Pet.created_at.label("created_at"),
            Owner.first_name.label("first_name"),
            Owner.last_name.label("last_name"),
            PetType.type_name.label("type_name"),
        )
        .select_from(Pet)
        .join(Owner, Owner.owner_id == Pet.owner_id)
        .join(PetType, PetType.type_id == Pet.type_id)
        .order_by(Pet.pet_id)
    )


def list_pets(gateway: Gateway) -> list[dict]:
    return gateway.fetch_all(_pet_listing())


def search_pets(gateway: Gateway, params: SearchParams) -> list[dict]:
    # Each present term narrows the result; terms are literal substrings.
    stmt = _pet_listing()
    if params.pet_name:
        stmt = stmt.where(Pet.pet_name.contains(params.pet_name, autoescape=True))
    if params.type_name:
        stmt = stmt.where(PetType.type_name.contains(params.type_name, autoescape=True))
    return gateway.fetch_all(stmt)


def get_pet(gateway: Gateway, pet_id: int) -> dict | None:
    return gateway.fetch_one(_pet_listing().where(Pet.pet_id == pet_id))


def list_owners(gateway: Gateway) -> list[dict]:
    return gateway.fetch_all(
        select(Owner.owner_id, Owner.first_name, Owner.last_name).order_by(
            Owner.last_name, Owner.first_name, Owner.owner_id
        )
    )


def list_pet_types(gateway: Gateway) -> list[dict]:
    return gateway.fetch_all(
        select(PetType.type_id, PetType.type_name).order_by(PetType.type_id)
    )


# -------------------------
# Writes
# -------------------------
def resolve_owner(gateway: Gateway, first_name: str, last_name: str) -> int:
    """
    Return the id of the owner named exactly (first_name, last_name),
    inserting a new owner row when none exists.

    The lookup and the insert are two separate statements. Two concurrent
    requests with the same new name can both miss the lookup and each insert
    a row; later lookups then reuse the lowest id.
    """
    existing = gateway.fetch_one(
        select(Owner.owner_id)
        .where(Owner.first_name == first_name, Owner.last_name == last_name)
        .order_by(Owner.owner_id)
        .limit(1)
    )
    if existing:
        return existing["owner_id"]

    result = gateway.execute(
        insert(Owner).values(first_name=first_name, last_name=last_name)
    )
    logger.info("Created owner %s (%s %s)", result.insert_id, first_name, last_name)
    return result.insert_id


def create_pet(gateway: Gateway, pet_name: str, age: int, owner_id: int, type_id: int) -> None:
    result = gateway.execute(
        insert(Pet).values(pet_name=pet_name, age=age, owner_id=owner_id, type_id=type_id)
    )
    logger.info("Created pet %s (%s)", result.insert_id, pet_name)


def update_pet(
    gateway: Gateway,
    pet_id: int,
    pet_name: str,
    age: int,
    owner_id: int,
    type_id: int,
) -> int:
    # Zero affected rows (unknown pet_id) is not an error.
    result = gateway.execute(
        update(Pet)
        .where(Pet.pet_id == pet_id)
        .values(pet_name=pet_name, age=age, owner_id=owner_id, type_id=type_id)
    )
    logger.info("Updated pet %s (%d row(s))", pet_id, result.affected_rows)
    return result.affected_rows


def delete_pet(gateway: Gateway, pet_id: int) -> int:
    result = gateway.execute(delete(Pet).where(Pet.pet_id == pet_id))
    logger.info("Deleted pet %s (%d row(s))", pet_id, result.affected_rows)
    return result.affected_rows


def save_pet(gateway: Gateway, form: PetForm, pet_id: int | None = None) -> None:
    """Resolve the form's owner, then insert a new pet or update ``pet_id``."""
    first_name, last_name = form.owner_names
    owner_id = resolve_owner(gateway, first_name, last_name)
    if pet_id is None:
        create_pet(gateway, form.pet_name, form.age, owner_id, form.type_id)
    else:
        update_pet(gateway, pet_id, form.pet_name, form.age, owner_id, form.type_id)
