"""Strongly typed identifiers for opinion board entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Sequential, assigned by the opinion store, never reused
OpinionId = NewType("OpinionId", int)

# Opaque caller identity supplied by the calling environment
UserId = NewType("UserId", str)
