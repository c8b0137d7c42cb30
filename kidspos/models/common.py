from __future__ import annotations

import enum


class DeleteStrategy(enum.Enum):
    """
    How a service removes rows of its entity.

    SOFT: flag the row (item.isDeleted) and hide it from reads.
    GUARDED_HARD: delete the row; the database rejects it while sales reference it.
    HARD: delete the row outright.
    """
    SOFT = "soft"
    GUARDED_HARD = "guarded_hard"
    HARD = "hard"
