from .metrics import (
    AttachmentScores,
    AbilityScores,
    RadarPoint,
    attachment_matrix_position,
    attachment_quadrant,
    ability_radar,
)

__all__ = [
    "AttachmentScores",
    "AbilityScores",
    "RadarPoint",
    "attachment_matrix_position",
    "attachment_quadrant",
    "ability_radar",
]
