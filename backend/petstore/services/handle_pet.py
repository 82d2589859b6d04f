"""Pet Handlers — add, update, delete, lookup and search of pets (6 methods).

Invariants:
    - Handlers receive already-validated requests (ValidationBehavior runs first)
    - Absence is always returned as NotFound, never raised and never a None result
    - Records from the repository are turned into PetDto before leaving the handler
"""

from petstore.core.faults import NotFound
from petstore.core.repository_protocols import PetRepository
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import (
    AddPetCommand, DeletePetCommand, FindPetsByStatusQuery,
    FindPetsByTagsQuery, GetPetByIdQuery, UpdatePetCommand,
)


class PetHandlers:
    """Pet operations over a PetRepository."""

    def __init__(self, pets: PetRepository):
        self.pets = pets

    async def add_pet(self, request: AddPetCommand) -> PetDto:
        record = await self.pets.add(request.pet.model_dump())
        return PetDto.model_validate(record)

    async def update_pet(self, request: UpdatePetCommand) -> PetDto | NotFound:
        if request.pet.id is None:
            return NotFound("Pet", "")
        record = await self.pets.update(request.pet.model_dump())
        if record is None:
            return NotFound("Pet", str(request.pet.id))
        return PetDto.model_validate(record)

    async def delete_pet(self, request: DeletePetCommand) -> None | NotFound:
        if not await self.pets.delete(request.pet_id):
            return NotFound("Pet", str(request.pet_id))
        return None

    async def find_pets_by_status(self, request: FindPetsByStatusQuery) -> list[PetDto]:
        records = await self.pets.find_by_status(request.statuses)
        return [PetDto.model_validate(r) for r in records]

    async def find_pets_by_tags(self, request: FindPetsByTagsQuery) -> list[PetDto]:
        records = await self.pets.find_by_tags(request.tags)
        return [PetDto.model_validate(r) for r in records]

    async def get_pet_by_id(self, request: GetPetByIdQuery) -> PetDto | NotFound:
        record = await self.pets.get(request.pet_id)
        if record is None:
            return NotFound("Pet", str(request.pet_id))
        return PetDto.model_validate(record)
