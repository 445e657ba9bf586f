"""Module: seed_data."""

import argparse
import random

from faker import Faker
from sqlalchemy import insert, select

from petrecords.db.gateway import Gateway
from petrecords.db.init_db import init_db
from petrecords.db.models.pet_type import PetType
from petrecords.schemas.pet import PetForm
from petrecords.services import records

fake = Faker()

PET_TYPES = ["Dog", "Cat", "Rabbit", "Bird", "Hamster", "Fish", "Reptile"]

# Typical lifespans cap generated ages so demo data looks plausible.
MAX_AGE_BY_TYPE = {
    "Dog": 16,
    "Cat": 20,
    "Rabbit": 10,
    "Bird": 15,
    "Hamster": 3,
    "Fish": 8,
    "Reptile": 25,
}


def seed_pet_types(gateway: Gateway, names: list[str] = PET_TYPES) -> int:
    # Insert only the type names that are missing; safe to rerun.
    existing = {
        row["type_name"]
        for row in gateway.fetch_all(select(PetType.type_name))
    }
    created = 0
    for name in names:
        if name in existing:
            continue
        gateway.execute(insert(PetType).values(type_name=name))
        created += 1
    return created


def seed_demo_pets(gateway: Gateway, n: int = 20, n_owners: int = 8) -> int:
    # Reuse a small pool of owner names so several pets share an owner.
    owner_names = [f"{fake.first_name()} {fake.last_name()}" for _ in range(n_owners)]
    pet_types = records.list_pet_types(gateway)
    if not pet_types:
        return 0

    for _ in range(n):
        pet_type = random.choice(pet_types)
        max_age = MAX_AGE_BY_TYPE.get(pet_type["type_name"], 15)
        form = PetForm.parse(
            pet_name=fake.first_name(),
            age=random.randint(1, max_age),
            owner_name=random.choice(owner_names),
            type_id=pet_type["type_id"],
        )
        records.save_pet(gateway, form)
    return n


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed pet types and optional demo pets.")
    parser.add_argument("--demo-pets", type=int, default=0, help="number of Faker-generated pets to add")
    args = parser.parse_args(argv)

    from petrecords.db.session import gateway

    print("Ensuring tables...")
    init_db(gateway.engine)

    print("Seeding pet types...")
    type_n = seed_pet_types(gateway)

    pet_n = 0
    if args.demo_pets > 0:
        print(f"Seeding demo pets ({args.demo_pets})...")
        pet_n = seed_demo_pets(gateway, args.demo_pets)

    print(f"Done. pet_types={type_n}, pets={pet_n}")


if __name__ == "__main__":
    # python -m petrecords.scripts.seed_data --demo-pets 20
    main()
