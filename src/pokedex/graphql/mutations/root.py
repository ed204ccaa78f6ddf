"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.attack import Attack, AttackCategory
from ..types.pokemon import Pokemon


# Input types for mutations
@strawberry.input
class CreatePokemonInput:
    """Input for creating a new Pokemon."""

    name: str
    types: list[str]
    resistant: list[str] = strawberry.field(default_factory=list)


@strawberry.input
class AddAttackInput:
    """Input for adding an attack to a bucket."""

    category: AttackCategory
    name: str
    type: str
    damage: int


@strawberry.input
class UpdateAttackInput:
    """New values for an attack. Omitted fields keep their current value."""

    name: str | None = None
    type: str | None = None
    damage: int | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Pokemon mutations
    @strawberry.mutation(name="renamePokemon")
    async def rename_pokemon(self, info: strawberry.Info, id: int, name: str) -> Pokemon | None:
        """Rename a Pokemon. Returns null when the ID is unknown."""
        from ..resolvers.pokemon import rename_pokemon

        return await rename_pokemon(info, id, name)

    @strawberry.mutation(name="createPokemon")
    async def create_pokemon(self, info: strawberry.Info, input: CreatePokemonInput) -> Pokemon:
        """Create a new Pokemon."""
        from ..resolvers.pokemon import create_pokemon

        return await create_pokemon(info, input.name, input.types, input.resistant)

    @strawberry.mutation(name="deletePokemon")
    async def delete_pokemon(self, info: strawberry.Info, id: int) -> list[Pokemon]:
        """Delete a Pokemon and return the remaining collection."""
        from ..resolvers.pokemon import delete_pokemon

        return await delete_pokemon(info, id)

    # Type mutations
    @strawberry.mutation(name="addType")
    async def add_type(self, info: strawberry.Info, name: str) -> list[str]:
        """Append an elemental type."""
        from ..resolvers.types import add_type

        return await add_type(info, name)

    @strawberry.mutation(name="updateType")
    async def update_type(self, info: strawberry.Info, name: str, change: str) -> list[str]:
        """Rename an elemental type in place."""
        from ..resolvers.types import update_type

        return await update_type(info, name, change)

    @strawberry.mutation(name="deleteType")
    async def delete_type(self, info: strawberry.Info, name: str) -> list[str]:
        """Remove an elemental type."""
        from ..resolvers.types import delete_type

        return await delete_type(info, name)

    # Attack mutations
    @strawberry.mutation(name="addAttack")
    async def add_attack(self, info: strawberry.Info, input: AddAttackInput) -> list[Attack]:
        """Add an attack to the fast or special bucket."""
        from ..resolvers.attack import add_attack

        return await add_attack(info, input.category, input.name, input.type, input.damage)

    @strawberry.mutation(name="updateAttack")
    async def update_attack(
        self,
        info: strawberry.Info,
        category: AttackCategory,
        name: str,
        input: UpdateAttackInput,
    ) -> list[Attack]:
        """Update an attack in place within its bucket."""
        from ..resolvers.attack import update_attack

        return await update_attack(
            info, category, name, new_name=input.name, type=input.type, damage=input.damage
        )

    @strawberry.mutation(name="deleteAttack")
    async def delete_attack(
        self, info: strawberry.Info, category: AttackCategory, name: str
    ) -> list[Attack]:
        """Remove an attack from its bucket."""
        from ..resolvers.attack import delete_attack

        return await delete_attack(info, category, name)
