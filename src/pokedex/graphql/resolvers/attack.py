"""
Attack resolvers for GraphQL API
"""

import strawberry

from ...store.models import Attack as AttackModel
from ...store.models import AttackCategory
from ...store.store import coerce_category
from ..context import get_store
from ..types.attack import Attack, AttackCatalog


def attack_to_graphql(attack: AttackModel, category: AttackCategory) -> Attack:
    """Convert a store attack into the GraphQL type."""
    return Attack(name=attack.name, type=attack.type, damage=attack.damage, category=category)


def _bucket_to_graphql(attacks: list[AttackModel], category: AttackCategory) -> list[Attack]:
    return [attack_to_graphql(a, category) for a in attacks]


# Query resolvers
async def resolve_attacks(
    info: strawberry.Info, category: AttackCategory | None = None
) -> list[Attack]:
    """
    List the attacks of one bucket, or of both buckets (fast first) when no
    category is given.
    """
    store = get_store(info)

    if category is not None:
        category = coerce_category(category)
        return _bucket_to_graphql(store.list_attacks(category), category)

    catalog = store.attack_catalog()
    return [
        *_bucket_to_graphql(catalog.fast, AttackCategory.FAST),
        *_bucket_to_graphql(catalog.special, AttackCategory.SPECIAL),
    ]


async def resolve_attack_catalog(info: strawberry.Info) -> AttackCatalog:
    """Both buckets of the global attack catalog."""
    catalog = get_store(info).attack_catalog()
    return AttackCatalog(
        fast=_bucket_to_graphql(catalog.fast, AttackCategory.FAST),
        special=_bucket_to_graphql(catalog.special, AttackCategory.SPECIAL),
    )


# Mutation resolvers
async def add_attack(
    info: strawberry.Info, category: AttackCategory, name: str, type: str, damage: int
) -> list[Attack]:
    """Append an attack to a bucket and return the bucket."""
    category = coerce_category(category)
    store = get_store(info)
    bucket = await store.add_attack(category, name, type, damage)
    return _bucket_to_graphql(bucket, category)


async def update_attack(
    info: strawberry.Info,
    category: AttackCategory,
    name: str,
    new_name: str | None = None,
    type: str | None = None,
    damage: int | None = None,
) -> list[Attack]:
    """Update the attacks matching ``name`` in place and return the bucket."""
    category = coerce_category(category)
    store = get_store(info)
    bucket = await store.update_attack(
        category, name, new_name=new_name, type=type, damage=damage
    )
    return _bucket_to_graphql(bucket, category)


async def delete_attack(info: strawberry.Info, category: AttackCategory, name: str) -> list[Attack]:
    """Remove the attacks matching ``name`` from a bucket and return the bucket."""
    category = coerce_category(category)
    store = get_store(info)
    bucket = await store.delete_attack(category, name)
    return _bucket_to_graphql(bucket, category)
