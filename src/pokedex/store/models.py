"""Pydantic models for the in-memory Pokemon catalog."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)")


class AttackCategory(str, Enum):
    """The two fixed attack buckets."""

    FAST = "fast"
    SPECIAL = "special"


class Attack(BaseModel):
    name: str
    type: str  # damage type, not a Pokemon type
    damage: int


class AttackSet(BaseModel):
    """Attacks partitioned into the fast and special buckets."""

    fast: list[Attack] = []
    special: list[Attack] = []

    def bucket(self, category: AttackCategory) -> list[Attack]:
        if category is AttackCategory.FAST:
            return self.fast
        return self.special

    def all(self) -> list[Attack]:
        return [*self.fast, *self.special]


class Scale(BaseModel):
    """A unit-suffixed range such as 0.61m - 0.79m."""

    minimum: str
    maximum: str

    @property
    def maximum_value(self) -> float | None:
        """Numeric part of ``maximum`` with the unit suffix stripped, or None if unparsable."""
        match = _LEADING_NUMBER.match(self.maximum)
        if not match:
            return None
        return float(match.group(1))


class EvolutionRequirement(BaseModel):
    amount: int
    name: str


class Evolution(BaseModel):
    id: int
    name: str


class PokemonRecord(BaseModel):
    """A Pokemon as held by the store.

    Only ``id`` and ``name`` are always present; records created through the
    API carry just their name, types and resistances.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    classification: str | None = None
    types: list[str] = []
    resistant: list[str] = []
    weight: Scale | None = None
    height: Scale | None = None
    flee_rate: float | None = Field(default=None, alias="fleeRate")
    evolution_requirements: EvolutionRequirement | None = Field(
        default=None, alias="evolutionRequirements"
    )
    evolutions: list[Evolution] = []
    max_cp: int | None = Field(default=None, alias="maxCP")
    max_hp: int | None = Field(default=None, alias="maxHP")
    attacks: AttackSet | None = None


class SeedData(BaseModel):
    """The seed document the store is built from."""

    pokemon: list[PokemonRecord] = []
    attacks: AttackSet = Field(default_factory=AttackSet)
    types: list[str] = []
