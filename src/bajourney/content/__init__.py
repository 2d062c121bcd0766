"""Curriculum content loading."""

from .loader import (
    Curriculum,
    CurriculumLoadError,
    curriculum_from_dict,
    load_curriculum,
    load_default_curriculum,
)

__all__ = [
    "Curriculum",
    "CurriculumLoadError",
    "curriculum_from_dict",
    "load_curriculum",
    "load_default_curriculum",
]
