"""
Service layer: session-level glue around the draw generator.
No persistence; callers store the returned matches.
"""
from .draw_service import (
    TeamValidationError,
    generate_draw,
    group_by_wave,
    resolve_lineup,
    validate_teams,
)

__all__ = [
    "TeamValidationError",
    "generate_draw",
    "group_by_wave",
    "resolve_lineup",
    "validate_teams",
]
