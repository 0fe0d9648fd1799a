from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from . import serialization
from .range import ZRange


def _check_identity(identity: Any) -> None:
    # bool is an int subclass but not a key
    if isinstance(identity, bool) or not isinstance(identity, str | int | uuid.UUID):
        raise ValueError(
            f"BlockIndex identity must be a str, int or UUID, got {identity!r}"
        )


@dataclass(eq=True, frozen=True)
class BlockIndex:
    """
    A range of a tensor partition, tagged with the partition's identity.

    Block indices are pure values: equality and hashing are structural over
    ``(range, identity)`` and no reference to the indexed tensor is kept.

    Attributes:
        range: The coordinates covered by the block.
        identity: A name, an integer key or a UUID for the block. UUIDs are
            written to JSON as strings and read back as strings.
    """

    range: ZRange
    identity: str | int | uuid.UUID

    def __post_init__(self):
        if not isinstance(self.range, ZRange):
            start, end = self.range
            object.__setattr__(self, "range", ZRange.of(start, end))
        _check_identity(self.identity)

    @classmethod
    def of(cls, range: ZRange, identity: str | int | uuid.UUID) -> BlockIndex:
        return cls(range, identity)

    @classmethod
    def fresh(cls, range: ZRange) -> BlockIndex:
        """A block index with a new random UUID identity."""
        return cls(range, uuid.uuid4())

    @property
    def ndim(self) -> int:
        return self.range.ndim

    def __str__(self):
        return f"BlockIndex({self.identity}, {self.range})"

    def to_json_data(self) -> dict[str, Any]:
        identity = self.identity
        if isinstance(identity, uuid.UUID):
            identity = str(identity)
        return {"id": identity, "range": self.range.to_json_data()}

    @classmethod
    def from_json_data(cls, data: Any) -> BlockIndex:
        if not isinstance(data, dict) or set(data) != {"id", "range"}:
            raise ValueError(f"Invalid BlockIndex data: {data!r}")
        identity = data["id"]
        if isinstance(identity, bool) or not isinstance(identity, str | int):
            raise ValueError(f"Invalid BlockIndex id: {identity!r}")
        return cls(ZRange.from_json_data(data["range"]), identity)

    def to_json(self, pretty: bool = False) -> str:
        return serialization.dumps(self.to_json_data(), pretty=pretty)

    @classmethod
    def from_json(cls, text: str) -> BlockIndex:
        return cls.from_json_data(serialization.loads(text, "BlockIndex"))
