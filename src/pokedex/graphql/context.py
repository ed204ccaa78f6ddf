"""
Access to per-request GraphQL context
"""

import strawberry

from ..logging import get_logger
from ..store import PokemonStore

logger = get_logger(__name__)


def get_store(info: strawberry.Info) -> PokemonStore:
    """
    Extract the Pokemon store from the GraphQL info object.

    Raises:
        RuntimeError: If the context was built without a store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Pokemon store is not available")
    return store
