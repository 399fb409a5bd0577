"""
Forum Module - Output views of forums.

Features:
- Immutable name/ID view
- Single and bulk projection
"""

from headless.modules.forum.output import (
    ForumLike,
    ForumView,
    project_forum,
    project_forums,
)

__all__ = ["ForumLike", "ForumView", "project_forum", "project_forums"]
