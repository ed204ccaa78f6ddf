"""
Pokemon GraphQL type definitions
"""

import strawberry

from .attack import Attack


@strawberry.type
class Scale:
    """Unit-suffixed range, e.g. 0.61m to 0.79m."""

    minimum: str
    maximum: str


@strawberry.type
class EvolutionRequirement:
    amount: int
    name: str


@strawberry.type
class Evolution:
    id: int
    name: str


@strawberry.type
class PokemonAttacks:
    """Attacks embedded in a Pokemon record."""

    fast: list[Attack]
    special: list[Attack]


@strawberry.type
class Pokemon:
    """Pokemon type for GraphQL API.

    Records created through ``createPokemon`` only carry id, name, types and
    resistances, so every other field is nullable.
    """

    id: int
    name: str
    classification: str | None = None
    types: list[str] = strawberry.field(default_factory=list)
    resistant: list[str] = strawberry.field(default_factory=list)
    weight: Scale | None = None
    height: Scale | None = None
    flee_rate: float | None = None
    evolution_requirements: EvolutionRequirement | None = None
    evolutions: list[Evolution] = strawberry.field(default_factory=list)
    max_cp: int | None = strawberry.field(name="maxCP", default=None)
    max_hp: int | None = strawberry.field(name="maxHP", default=None)
    attacks: PokemonAttacks | None = None
