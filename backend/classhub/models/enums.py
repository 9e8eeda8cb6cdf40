from __future__ import annotations

import enum


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    NORMAL = "NORMAL"


class PostType(str, enum.Enum):
    ASSIGNMENT = "ASSIGNMENT"
    MESSAGE = "MESSAGE"
