# movies_lib/utils/helpers.py

import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)

RANDOM_SUFFIX_UPPER_BOUND = 1000

# --- Text Processing ---

def is_blank(text: Optional[str]) -> bool:
    """
    Checks whether a string is None, empty or whitespace only.

    Args:
        text: The input string or None.

    Returns:
        True when there is no usable content.
    """
    return text is None or not text.strip()


def append_random_suffix(name: str, rng: Optional[random.Random] = None) -> str:
    """
    Appends a space and a random integer in [0, 999] to a name.

    Args:
        name: The value to extend.
        rng: Optional random generator (tests pass a seeded one).

    Returns:
        The suffixed value, e.g. "Action 417".
    """
    generator = rng or random
    suffix = generator.randrange(RANDOM_SUFFIX_UPPER_BOUND)
    return f"{name} {suffix}"
