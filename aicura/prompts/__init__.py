"""Centralized prompt templates for the external analysis model.

Import any prompt constant directly:
    from aicura.prompts import ANALYSIS_SYSTEM, build_prompt
"""

from aicura.prompts.analysis import (
    ANALYSIS_SYSTEM,
    ANALYSIS_USER,
    NOT_PROVIDED,
    build_prompt,
)

__all__ = [
    "ANALYSIS_SYSTEM",
    "ANALYSIS_USER",
    "NOT_PROVIDED",
    "build_prompt",
]
