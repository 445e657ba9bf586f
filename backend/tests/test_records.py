from petrecords.db.models.owner import Owner
from petrecords.db.models.pet import Pet
from petrecords.schemas.pet import PetForm, SearchParams
from petrecords.services import records


def _add_pet(gateway, pet_name, owner_name="John Smith", type_id=1, age=3):
    form = PetForm.parse(pet_name=pet_name, age=age, owner_name=owner_name, type_id=type_id)
    records.save_pet(gateway, form)


def test_resolve_owner_reuses_existing_row(gateway, count_rows):
    first = records.resolve_owner(gateway, "Jane", "Doe")
    second = records.resolve_owner(gateway, "Jane", "Doe")

    assert first == second
    assert count_rows(Owner) == 1


def test_resolve_owner_matches_both_names_exactly(gateway, count_rows):
    jane_doe = records.resolve_owner(gateway, "Jane", "Doe")
    jane_roe = records.resolve_owner(gateway, "Jane", "Roe")
    cher = records.resolve_owner(gateway, "Cher", "")

    assert len({jane_doe, jane_roe, cher}) == 3
    assert count_rows(Owner) == 3


def test_save_pet_creates_owner_once_for_shared_name(gateway, count_rows):
    _add_pet(gateway, "Rex", owner_name="John Smith")
    _add_pet(gateway, "Tom", owner_name="John Smith", type_id=2)

    pets = records.list_pets(gateway)
    assert [p["pet_name"] for p in pets] == ["Rex", "Tom"]
    assert pets[0]["owner_id"] == pets[1]["owner_id"]
    assert count_rows(Owner) == 1
    assert count_rows(Pet) == 2


def test_list_pets_joins_owner_and_type(gateway):
    _add_pet(gateway, "Rex", owner_name="Mary Ann Smith", type_id=1, age=4)

    (pet,) = records.list_pets(gateway)
    assert pet["pet_name"] == "Rex"
    assert pet["age"] == 4
    assert pet["first_name"] == "Mary"
    assert pet["last_name"] == "Ann Smith"
    assert pet["type_name"] == "Dog"
    assert pet["created_at"] is not None


def test_update_pet_keeps_id_and_reassigns_owner(gateway):
    _add_pet(gateway, "Rex", owner_name="John Smith")
    pet_id = records.list_pets(gateway)[0]["pet_id"]

    form = PetForm.parse(pet_name="Rexy", age="5", owner_name="Ann Lee", type_id="2")
    records.save_pet(gateway, form, pet_id=pet_id)

    pet = records.get_pet(gateway, pet_id)
    assert pet["pet_id"] == pet_id
    assert pet["pet_name"] == "Rexy"
    assert pet["age"] == 5
    assert (pet["first_name"], pet["last_name"]) == ("Ann", "Lee")
    assert pet["type_name"] == "Cat"


def test_update_unknown_pet_is_silent_noop(gateway, count_rows):
    owner_id = records.resolve_owner(gateway, "Jane", "Doe")

    affected = records.update_pet(gateway, 999, "Ghost", 2, owner_id, 1)

    assert affected == 0
    assert count_rows(Pet) == 0


def test_delete_pet_removes_only_that_row(gateway):
    _add_pet(gateway, "Rex")
    _add_pet(gateway, "Tom")
    rex, tom = records.list_pets(gateway)

    assert records.delete_pet(gateway, rex["pet_id"]) == 1
    assert [p["pet_id"] for p in records.list_pets(gateway)] == [tom["pet_id"]]


def test_delete_absent_pet_affects_nothing(gateway):
    _add_pet(gateway, "Rex")

    assert records.delete_pet(gateway, 12345) == 0
    assert len(records.list_pets(gateway)) == 1


def test_get_pet_returns_none_when_absent(gateway):
    assert records.get_pet(gateway, 1) is None


def test_search_filters_by_substring_and_combines_with_and(gateway):
    _add_pet(gateway, "Rex", type_id=1)
    _add_pet(gateway, "Rene", type_id=2)
    _add_pet(gateway, "Bella", type_id=1)

    by_name = records.search_pets(gateway, SearchParams(pet_name="Re"))
    assert [p["pet_name"] for p in by_name] == ["Rex", "Rene"]

    by_type = records.search_pets(gateway, SearchParams(type_name="Do"))
    assert [p["pet_name"] for p in by_type] == ["Rex", "Bella"]

    both = records.search_pets(gateway, SearchParams(pet_name="Re", type_name="Cat"))
    assert [p["pet_name"] for p in both] == ["Rene"]

    everything = records.search_pets(gateway, SearchParams())
    assert len(everything) == 3


def test_search_terms_are_literal(gateway):
    _add_pet(gateway, "Rex")
    _add_pet(gateway, "100%_Good")

    assert [p["pet_name"] for p in records.search_pets(gateway, SearchParams(pet_name="%"))] == ["100%_Good"]
    assert records.search_pets(gateway, SearchParams(pet_name="R_x")) == []


def test_list_owners_and_pet_types(gateway):
    records.resolve_owner(gateway, "Zed", "Young")
    records.resolve_owner(gateway, "Amy", "Adams")

    owners = records.list_owners(gateway)
    assert [(o["first_name"], o["last_name"]) for o in owners] == [("Amy", "Adams"), ("Zed", "Young")]

    pet_types = records.list_pet_types(gateway)
    assert [(t["type_id"], t["type_name"]) for t in pet_types] == [(1, "Dog"), (2, "Cat"), (3, "Rabbit")]
