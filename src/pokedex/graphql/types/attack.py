"""
Attack GraphQL type definitions
"""

import strawberry

from ...store.models import AttackCategory as AttackCategoryModel

AttackCategory = strawberry.enum(
    AttackCategoryModel,
    name="AttackCategory",
    description="Attack bucket enumeration.",
)


@strawberry.type
class Attack:
    """An attack, tagged with the bucket it belongs to."""

    name: str
    type: str
    damage: int
    category: AttackCategory


@strawberry.type
class AttackCatalog:
    """Both attack buckets of the global catalog."""

    fast: list[Attack]
    special: list[Attack]
