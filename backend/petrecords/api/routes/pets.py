"""Module: pets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import RedirectResponse

from petrecords.api.routes.deps import get_gateway
from petrecords.core.errors import NotFoundError
from petrecords.db.gateway import Gateway
from petrecords.schemas.pet import PetForm, SearchParams
from petrecords.services import records
from petrecords.views import render

router = APIRouter()


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def _require_pet(gateway: Gateway, pet_id: int) -> dict:
    pet = records.get_pet(gateway, pet_id)
    if pet is None:
        raise NotFoundError()
    return pet


# -------------------------
# Listing / search
# -------------------------
@router.get("/", summary="List all pets with owner and type")
def index(request: Request, gateway: Gateway = Depends(get_gateway)):
    pets = records.list_pets(gateway)
    return render(request, "index", {"pets": pets, "search": SearchParams()})


@router.get("/search", summary="Filter pets by name and type substrings")
def search(
    request: Request,
    pet_name: str | None = Query(default=None),
    type_name: str | None = Query(default=None),
    gateway: Gateway = Depends(get_gateway),
):
    params = SearchParams(pet_name=pet_name, type_name=type_name)
    pets = records.search_pets(gateway, params)
    return render(request, "index", {"pets": pets, "search": params})


# -------------------------
# Create
# -------------------------
@router.get("/create", summary="Show the new pet form")
def create_form(request: Request, gateway: Gateway = Depends(get_gateway)):
    pet_types = records.list_pet_types(gateway)
    return render(request, "create", {"pet_types": pet_types})


@router.post("/create", summary="Create a pet, creating its owner if needed")
def create_pet(
    pet_name: str | None = Form(default=None),
    age: str | None = Form(default=None),
    owner_name: str | None = Form(default=None),
    type_id: str | None = Form(default=None),
    gateway: Gateway = Depends(get_gateway),
):
    form = PetForm.parse(pet_name=pet_name, age=age, owner_name=owner_name, type_id=type_id)
    records.save_pet(gateway, form)
    return _back_to_list()


# -------------------------
# Edit
# -------------------------
@router.get("/edit/{pet_id}", summary="Show the edit form for a pet")
def edit_form(request: Request, pet_id: int, gateway: Gateway = Depends(get_gateway)):
    pet = _require_pet(gateway, pet_id)
    owners = records.list_owners(gateway)
    pet_types = records.list_pet_types(gateway)
    return render(request, "edit", {"pet": pet, "owners": owners, "pet_types": pet_types})


@router.post("/edit/{pet_id}", summary="Update a pet in place")
def edit_pet(
    pet_id: int,
    pet_name: str | None = Form(default=None),
    age: str | None = Form(default=None),
    owner_name: str | None = Form(default=None),
    type_id: str | None = Form(default=None),
    gateway: Gateway = Depends(get_gateway),
):
    form = PetForm.parse(pet_name=pet_name, age=age, owner_name=owner_name, type_id=type_id)
    records.save_pet(gateway, form, pet_id=pet_id)
    return _back_to_list()


# -------------------------
# Delete
# -------------------------
@router.get("/delete/{pet_id}", summary="Confirm deletion of a pet")
def delete_confirm(request: Request, pet_id: int, gateway: Gateway = Depends(get_gateway)):
    pet = _require_pet(gateway, pet_id)
    return render(request, "delete", {"pet": pet})


@router.post("/delete/{pet_id}", summary="Delete a pet")
def delete_pet(pet_id: int, gateway: Gateway = Depends(get_gateway)):
    records.delete_pet(gateway, pet_id)
    return _back_to_list()
