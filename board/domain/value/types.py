"""Domain value objects for the opinion board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import ConfigDict

from board.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Type of vote."""

    UP = "up"
    DOWN = "down"


class VoteOutcome(str, Enum):
    """What a vote call did to the ledger."""

    CREATED = "created"  # First vote by this user on this opinion
    UNCHANGED = "unchanged"  # Same choice as before, nothing changed
    CHANGED = "changed"  # Vote flipped between up and down


class MediaKind(str, Enum):
    """Kind of media attached to an opinion."""

    IMAGE = "image"
    VIDEO = "video"


class Media(ValueObject):
    """Binary attachment of an opinion.

    The payload is stored as-is, nothing is transcoded or validated.
    Serialized to JSON as base64.
    """

    model_config = ConfigDict(
        frozen=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    kind: MediaKind
    data: bytes
