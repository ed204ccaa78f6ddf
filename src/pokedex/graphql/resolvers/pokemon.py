"""
Pokemon resolvers for GraphQL API
"""

import strawberry

from ...logging import get_logger
from ...store.models import AttackCategory, PokemonRecord
from ..context import get_store
from ..types.pokemon import Evolution, EvolutionRequirement, Pokemon, PokemonAttacks, Scale
from .attack import attack_to_graphql

logger = get_logger(__name__)


def pokemon_to_graphql(record: PokemonRecord) -> Pokemon:
    """Convert a store record into the GraphQL type."""
    attacks = None
    if record.attacks is not None:
        attacks = PokemonAttacks(
            fast=[attack_to_graphql(a, AttackCategory.FAST) for a in record.attacks.fast],
            special=[attack_to_graphql(a, AttackCategory.SPECIAL) for a in record.attacks.special],
        )

    requirements = None
    if record.evolution_requirements is not None:
        requirements = EvolutionRequirement(
            amount=record.evolution_requirements.amount,
            name=record.evolution_requirements.name,
        )

    return Pokemon(
        id=record.id,
        name=record.name,
        classification=record.classification,
        types=list(record.types),
        resistant=list(record.resistant),
        weight=(
            Scale(minimum=record.weight.minimum, maximum=record.weight.maximum)
            if record.weight
            else None
        ),
        height=(
            Scale(minimum=record.height.minimum, maximum=record.height.maximum)
            if record.height
            else None
        ),
        flee_rate=record.flee_rate,
        evolution_requirements=requirements,
        evolutions=[Evolution(id=e.id, name=e.name) for e in record.evolutions],
        max_cp=record.max_cp,
        max_hp=record.max_hp,
        attacks=attacks,
    )


def _optional(record: PokemonRecord | None) -> Pokemon | None:
    return pokemon_to_graphql(record) if record is not None else None


# Query resolvers
async def resolve_pokemons(info: strawberry.Info) -> list[Pokemon]:
    """All Pokemon in insertion order."""
    return [pokemon_to_graphql(p) for p in get_store(info).list_pokemon()]


async def resolve_pokemon_by_id(info: strawberry.Info, id: int) -> Pokemon | None:
    """Resolve a Pokemon by its ID. Returns None when absent."""
    record = get_store(info).get_pokemon_by_id(id)
    if record is None:
        logger.info("Pokemon not found", pokemon_id=id)
    return _optional(record)


async def resolve_pokemon_by_name(info: strawberry.Info, name: str) -> Pokemon | None:
    """Resolve the first Pokemon with the given name. Returns None when absent."""
    record = get_store(info).get_pokemon_by_name(name)
    if record is None:
        logger.info("Pokemon not found", name=name)
    return _optional(record)


async def resolve_pokemon_by_max_height(info: strawberry.Info, max_height: float) -> Pokemon | None:
    """First Pokemon whose maximum height reaches ``max_height`` metres."""
    return _optional(get_store(info).find_by_max_height(max_height))


async def resolve_pokemons_by_type(info: strawberry.Info, name: str) -> list[Pokemon]:
    return [pokemon_to_graphql(p) for p in get_store(info).find_by_type(name)]


async def resolve_pokemons_by_attack(info: strawberry.Info, name: str) -> list[Pokemon]:
    return [pokemon_to_graphql(p) for p in get_store(info).find_by_attack_name(name)]


# Mutation resolvers
async def rename_pokemon(info: strawberry.Info, id: int, name: str) -> Pokemon | None:
    """
    Rename a Pokemon.

    Returns None and leaves the collection untouched when the ID is unknown.
    """
    record = await get_store(info).rename_pokemon(id, name)
    if record is None:
        logger.info("Rename skipped, pokemon not found", pokemon_id=id)
    return _optional(record)


async def create_pokemon(
    info: strawberry.Info, name: str, types: list[str], resistant: list[str] | None = None
) -> Pokemon:
    """Create a Pokemon holding only its name, types and resistances."""
    record = await get_store(info).create_pokemon(name, types, resistant)
    return pokemon_to_graphql(record)


async def delete_pokemon(info: strawberry.Info, id: int) -> list[Pokemon]:
    """Delete a Pokemon by ID and return the remaining collection."""
    remaining = await get_store(info).delete_pokemon(id)
    return [pokemon_to_graphql(p) for p in remaining]
