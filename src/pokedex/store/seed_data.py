"""
Seed data loading.

The store is populated once per application instance from a JSON document.
The bundled document holds the first twelve Gen-1 Pokemon, the global attack
catalog and the elemental types; a different file can be configured through
``POKEDEX_SEED_PATH``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ..config import settings
from ..logging import get_logger
from .errors import SeedDataError
from .models import SeedData

logger = get_logger(__name__)

DEFAULT_SEED_PATH = Path(__file__).parent / "data" / "seed.json"


def load_seed_data(path: str | Path | None = None) -> SeedData:
    """
    Load and validate a seed document.

    Args:
        path: Seed file to read. Falls back to ``settings.seed_path`` and then
            to the bundled seed.

    Returns:
        Validated seed data

    Raises:
        SeedDataError: If the file is missing, unreadable, or does not match the seed schema
    """
    seed_path = Path(path or settings.seed_path or DEFAULT_SEED_PATH)

    try:
        raw = seed_path.read_bytes()
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed file not found: {seed_path}") from e
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {seed_path}: {e}") from e

    try:
        seed = SeedData.model_validate_json(raw)
    except ValidationError as e:
        raise SeedDataError(f"Invalid seed file {seed_path}: {e}") from e

    logger.debug(
        "Seed data loaded",
        path=str(seed_path),
        pokemon=len(seed.pokemon),
        fast_attacks=len(seed.attacks.fast),
        special_attacks=len(seed.attacks.special),
        types=len(seed.types),
    )
    return seed
