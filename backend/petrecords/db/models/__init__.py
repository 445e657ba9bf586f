# backend/petrecords/db/models/__init__.py

from petrecords.db.models.owner import Owner
from petrecords.db.models.pet import Pet
from petrecords.db.models.pet_type import PetType
