"""
Forum domain types.

Includes:
- GroupId (32-byte group identifier)
- Forum (named, salted group)
"""

from dataclasses import dataclass, field

UNIQUE_ID_LENGTH = 32
FORUM_SALT_LENGTH = 32
MAX_FORUM_NAME_LENGTH = 100


@dataclass(frozen=True)
class GroupId:
    """Identifier of a group."""

    bytes: bytes

    def __post_init__(self) -> None:
        if len(self.bytes) != UNIQUE_ID_LENGTH:
            raise ValueError(
                f"Group ID must be {UNIQUE_ID_LENGTH} bytes, got {len(self.bytes)}"
            )
        # Freeze bytearray/memoryview input
        object.__setattr__(self, "bytes", bytes(self.bytes))

    @classmethod
    def from_hex(cls, value: str) -> "GroupId":
        return cls(bytes.fromhex(value))

    def hex(self) -> str:
        return self.bytes.hex()

    def __repr__(self) -> str:
        return f"<GroupId {self.hex()[:8]}>"


@dataclass(frozen=True)
class Forum:
    """Forum group with a display name."""

    id: GroupId
    name: str
    salt: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if not self.name or len(self.name.encode("utf-8")) > MAX_FORUM_NAME_LENGTH:
            raise ValueError(
                f"Forum name must be 1-{MAX_FORUM_NAME_LENGTH} bytes of UTF-8"
            )
        if len(self.salt) != FORUM_SALT_LENGTH:
            raise ValueError(f"Forum salt must be {FORUM_SALT_LENGTH} bytes")
