"""Builders for forum test inputs."""

from types import SimpleNamespace

from headless.models.forum import FORUM_SALT_LENGTH, UNIQUE_ID_LENGTH, Forum, GroupId


def make_forum(name: str, seed: int) -> Forum:
    """Build a valid forum whose ID bytes are all ``seed``."""
    return Forum(
        id=GroupId(bytes([seed]) * UNIQUE_ID_LENGTH),
        name=name,
        salt=bytes([0xAA]) * FORUM_SALT_LENGTH,
    )


def make_forum_like(name: str, id_bytes: bytes) -> SimpleNamespace:
    """Build a duck-typed forum with arbitrary ID bytes."""
    return SimpleNamespace(name=name, id=SimpleNamespace(bytes=id_bytes))
