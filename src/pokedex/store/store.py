"""
In-memory Pokemon store.

A ``PokemonStore`` owns every mutable collection of the service: the Pokemon
records, the global attack catalog and the elemental type list. The
application creates one store and hands it to resolvers through the GraphQL
context; tests build their own isolated stores.
"""

from __future__ import annotations

import asyncio

from ..logging import get_logger
from .errors import UnknownAttackCategoryError
from .models import Attack, AttackCategory, AttackSet, PokemonRecord, SeedData

logger = get_logger(__name__)


def coerce_category(category: AttackCategory | str) -> AttackCategory:
    try:
        return AttackCategory(category)
    except ValueError as e:
        raise UnknownAttackCategoryError(category) from e


class PokemonStore:
    """Process-wide catalog of Pokemon, attacks and types.

    Reads return fresh list objects. Mutations are coroutines serialised by a
    single lock and never await anything while holding it.
    """

    def __init__(
        self,
        pokemon: list[PokemonRecord] | None = None,
        attacks: AttackSet | None = None,
        types: list[str] | None = None,
    ):
        self._pokemon: list[PokemonRecord] = list(pokemon or [])
        self._attacks: AttackSet = attacks.model_copy(deep=True) if attacks is not None else AttackSet()
        self._types: list[str] = list(types or [])
        # Ids are never reused, even after deletions
        self._next_id = max((p.id for p in self._pokemon), default=0) + 1
        self._lock = asyncio.Lock()

    @classmethod
    def from_seed(cls, seed: SeedData) -> PokemonStore:
        """Build a store from a deep copy of the seed."""
        seed = seed.model_copy(deep=True)
        return cls(pokemon=seed.pokemon, attacks=seed.attacks, types=seed.types)

    @property
    def next_id(self) -> int:
        return self._next_id

    # Pokemon queries
    def list_pokemon(self) -> list[PokemonRecord]:
        return list(self._pokemon)

    def get_pokemon_by_id(self, pokemon_id: int) -> PokemonRecord | None:
        return next((p for p in self._pokemon if p.id == pokemon_id), None)

    def get_pokemon_by_name(self, name: str) -> PokemonRecord | None:
        return next((p for p in self._pokemon if p.name == name), None)

    def find_by_max_height(self, max_height: float) -> PokemonRecord | None:
        """First Pokemon whose maximum height is at least ``max_height``."""
        for pokemon in self._pokemon:
            if pokemon.height is None:
                continue
            value = pokemon.height.maximum_value
            if value is not None and value >= max_height:
                return pokemon
        return None

    def find_by_type(self, type_name: str) -> list[PokemonRecord]:
        return [p for p in self._pokemon if type_name in p.types]

    def find_by_attack_name(self, attack_name: str) -> list[PokemonRecord]:
        return [
            p
            for p in self._pokemon
            if p.attacks is not None and any(a.name == attack_name for a in p.attacks.all())
        ]

    # Type and attack queries
    def list_types(self) -> list[str]:
        return list(self._types)

    def list_attacks(self, category: AttackCategory | str) -> list[Attack]:
        return list(self._attacks.bucket(coerce_category(category)))

    def attack_catalog(self) -> AttackSet:
        return AttackSet(fast=list(self._attacks.fast), special=list(self._attacks.special))

    # Pokemon mutations
    async def rename_pokemon(self, pokemon_id: int, name: str) -> PokemonRecord | None:
        async with self._lock:
            pokemon = self.get_pokemon_by_id(pokemon_id)
            if pokemon is None:
                return None
            old_name = pokemon.name
            pokemon.name = name
        logger.info("Pokemon renamed", pokemon_id=pokemon_id, old_name=old_name, name=name)
        return pokemon

    async def create_pokemon(
        self, name: str, types: list[str], resistant: list[str] | None = None
    ) -> PokemonRecord:
        async with self._lock:
            pokemon = PokemonRecord(
                id=self._next_id,
                name=name,
                types=list(types),
                resistant=list(resistant or []),
            )
            self._next_id += 1
            self._pokemon.append(pokemon)
        logger.info("Pokemon created", pokemon_id=pokemon.id, name=name)
        return pokemon

    async def delete_pokemon(self, pokemon_id: int) -> list[PokemonRecord]:
        async with self._lock:
            for index, pokemon in enumerate(self._pokemon):
                if pokemon.id == pokemon_id:
                    del self._pokemon[index]
                    logger.info("Pokemon deleted", pokemon_id=pokemon_id)
                    break
            return list(self._pokemon)

    # Type mutations
    async def add_type(self, name: str) -> list[str]:
        async with self._lock:
            self._types.append(name)
            types = list(self._types)
        logger.info("Type added", name=name)
        return types

    async def update_type(self, name: str, change: str) -> list[str]:
        async with self._lock:
            self._types[:] = [change if t == name else t for t in self._types]
            types = list(self._types)
        logger.info("Type updated", name=name, change=change)
        return types

    async def delete_type(self, name: str) -> list[str]:
        async with self._lock:
            self._types[:] = [t for t in self._types if t != name]
            types = list(self._types)
        logger.info("Type deleted", name=name)
        return types

    # Attack mutations
    async def add_attack(
        self, category: AttackCategory | str, name: str, type: str, damage: int
    ) -> list[Attack]:
        category = coerce_category(category)
        bucket = self._attacks.bucket(category)
        async with self._lock:
            bucket.append(Attack(name=name, type=type, damage=damage))
            attacks = list(bucket)
        logger.info("Attack added", category=category.value, name=name)
        return attacks

    async def update_attack(
        self,
        category: AttackCategory | str,
        name: str,
        *,
        new_name: str | None = None,
        type: str | None = None,
        damage: int | None = None,
    ) -> list[Attack]:
        """Update every attack named ``name`` in the bucket; omitted fields are left as is."""
        category = coerce_category(category)
        bucket = self._attacks.bucket(category)
        async with self._lock:
            for attack in bucket:
                if attack.name != name:
                    continue
                if new_name is not None:
                    attack.name = new_name
                if type is not None:
                    attack.type = type
                if damage is not None:
                    attack.damage = damage
            attacks = list(bucket)
        logger.info("Attack updated", category=category.value, name=name)
        return attacks

    async def delete_attack(self, category: AttackCategory | str, name: str) -> list[Attack]:
        category = coerce_category(category)
        bucket = self._attacks.bucket(category)
        async with self._lock:
            bucket[:] = [a for a in bucket if a.name != name]
            attacks = list(bucket)
        logger.info("Attack deleted", category=category.value, name=name)
        return attacks
