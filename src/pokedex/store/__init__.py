"""
In-memory data store for the Pokedex API
"""

from .errors import PokedexError, SeedDataError, UnknownAttackCategoryError
from .models import (
    Attack,
    AttackCategory,
    AttackSet,
    Evolution,
    EvolutionRequirement,
    PokemonRecord,
    Scale,
    SeedData,
)
from .seed_data import load_seed_data
from .store import PokemonStore, coerce_category


def create_store(seed_path: str | None = None) -> PokemonStore:
    """Build a fresh store from the configured (or given) seed file."""
    return PokemonStore.from_seed(load_seed_data(seed_path))


__all__ = [
    "Attack",
    "AttackCategory",
    "AttackSet",
    "Evolution",
    "EvolutionRequirement",
    "PokedexError",
    "PokemonRecord",
    "PokemonStore",
    "Scale",
    "SeedData",
    "SeedDataError",
    "UnknownAttackCategoryError",
    "coerce_category",
    "create_store",
    "load_seed_data",
]
