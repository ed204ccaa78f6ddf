"""
Root GraphQL query definitions
"""

import strawberry

from ..types.attack import Attack, AttackCatalog, AttackCategory
from ..types.pokemon import Pokemon


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def pokemons(self, info: strawberry.Info) -> list[Pokemon]:
        """Get all Pokemon in insertion order."""
        from ..resolvers.pokemon import resolve_pokemons

        return await resolve_pokemons(info)

    @strawberry.field
    async def pokemon_by_id(self, info: strawberry.Info, id: int) -> Pokemon | None:
        """Get a Pokemon by ID."""
        from ..resolvers.pokemon import resolve_pokemon_by_id

        return await resolve_pokemon_by_id(info, id)

    @strawberry.field
    async def pokemon_by_name(self, info: strawberry.Info, name: str) -> Pokemon | None:
        """Get the first Pokemon with the given name."""
        from ..resolvers.pokemon import resolve_pokemon_by_name

        return await resolve_pokemon_by_name(info, name)

    @strawberry.field
    async def pokemon_by_max_height(
        self, info: strawberry.Info, max_height: float
    ) -> Pokemon | None:
        """Get the first Pokemon whose maximum height is at least maxHeight."""
        from ..resolvers.pokemon import resolve_pokemon_by_max_height

        return await resolve_pokemon_by_max_height(info, max_height)

    @strawberry.field
    async def types(self, info: strawberry.Info) -> list[str]:
        """Get the elemental type list."""
        from ..resolvers.types import resolve_types

        return await resolve_types(info)

    @strawberry.field
    async def pokemons_by_type(self, info: strawberry.Info, name: str) -> list[Pokemon]:
        """Get all Pokemon having the given type."""
        from ..resolvers.pokemon import resolve_pokemons_by_type

        return await resolve_pokemons_by_type(info, name)

    @strawberry.field
    async def pokemons_by_attack(self, info: strawberry.Info, name: str) -> list[Pokemon]:
        """Get all Pokemon knowing a fast or special attack with the given name."""
        from ..resolvers.pokemon import resolve_pokemons_by_attack

        return await resolve_pokemons_by_attack(info, name)

    @strawberry.field
    async def attacks(
        self, info: strawberry.Info, category: AttackCategory | None = None
    ) -> list[Attack]:
        """Get the attacks of one bucket, or of both buckets when no category is given."""
        from ..resolvers.attack import resolve_attacks

        return await resolve_attacks(info, category)

    @strawberry.field
    async def attack_catalog(self, info: strawberry.Info) -> AttackCatalog:
        """Get both buckets of the global attack catalog."""
        from ..resolvers.attack import resolve_attack_catalog

        return await resolve_attack_catalog(info)
