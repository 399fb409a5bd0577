"""
Forum Output - Presentation views of forums.

Projects forum domain objects onto the two fields exposed
to clients: display name and raw group ID bytes.
"""

import base64
from typing import Any, Iterable, Protocol

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationInfo,
    field_serializer,
    field_validator,
)


class ForumIdLike(Protocol):
    """Anything exposing raw identifier bytes."""

    @property
    def bytes(self) -> bytes: ...


class ForumLike(Protocol):
    """Anything exposing a forum name and identifier."""

    @property
    def name(self) -> str: ...

    @property
    def id(self) -> ForumIdLike: ...


class ForumView(BaseModel):
    """
    Immutable forum view for output.

    The ID is held as raw bytes; JSON output encodes it as
    standard base64 (``+`` and ``/`` alphabet, padded).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    id: bytes

    @field_validator("id", mode="before")
    @classmethod
    def decode_json_id(cls, v: Any, info: ValidationInfo) -> Any:
        """Decode base64 ID strings coming from JSON."""
        if info.mode == "json" and isinstance(v, str):
            return base64.b64decode(v, validate=True)
        return v

    @field_serializer("id", when_used="json")
    def encode_json_id(self, v: bytes) -> str:
        return base64.b64encode(v).decode("ascii")

    @classmethod
    def from_forum(cls, forum: ForumLike) -> "ForumView":
        """Copy name and ID bytes out of a forum."""
        return cls(name=forum.name, id=bytes(forum.id.bytes))


def project_forum(forum: ForumLike) -> ForumView:
    """Get output view of a single forum."""
    return ForumView.from_forum(forum)


def project_forums(forums: Iterable[ForumLike]) -> list[ForumView]:
    """
    Get output views of forums.

    Args:
        forums: Forums in display order

    Returns:
        One view per forum, same order
    """
    views = [project_forum(forum) for forum in forums]
    logger.debug(f"Projected {len(views)} forums")
    return views
