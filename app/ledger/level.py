"""Level derivation: ``level = total_points // 1000 + 1``."""

POINTS_PER_LEVEL = 1000


def level_for(total_points: int) -> int:
    """Return the level for ``total_points`` (level 1 starts at 0 points)."""
    if total_points < 0:
        raise ValueError(f"total_points must not be negative, got {total_points}")
    return total_points // POINTS_PER_LEVEL + 1


def points_into_level(total_points: int) -> int:
    return total_points % POINTS_PER_LEVEL


def points_to_next_level(total_points: int) -> int:
    return POINTS_PER_LEVEL - points_into_level(total_points)
