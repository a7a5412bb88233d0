"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    NOT_OVER = "not over"
    SOLVED = "solved"
    FAILED = "failed"
    INVALID_INPUT = "invalid input"
