"""
Elemental type resolvers for GraphQL API
"""

import strawberry

from ..context import get_store


async def resolve_types(info: strawberry.Info) -> list[str]:
    return get_store(info).list_types()


async def add_type(info: strawberry.Info, name: str) -> list[str]:
    return await get_store(info).add_type(name)


async def update_type(info: strawberry.Info, name: str, change: str) -> list[str]:
    """Replace every occurrence of ``name`` with ``change``."""
    return await get_store(info).update_type(name, change)


async def delete_type(info: strawberry.Info, name: str) -> list[str]:
    """Remove every occurrence of ``name``."""
    return await get_store(info).delete_type(name)
