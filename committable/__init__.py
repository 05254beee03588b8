"""Structural checks for commit messages."""

__version__ = "0.1.0"

from .commit import Commit
from .models import ErrorType, GroupError, SingleError
from .rules import (
    BodyLength,
    HeaderLength,
    NonEmptyBody,
    NonEmptyHeader,
    Rule,
    SingleEmptyLineBeforeBody,
)
from .validator import DEFAULT_RULES, check_all_rules, check_commit, validate_message

__all__ = [
    'Commit',
    'ErrorType',
    'GroupError',
    'SingleError',
    'Rule',
    'NonEmptyHeader',
    'NonEmptyBody',
    'SingleEmptyLineBeforeBody',
    'HeaderLength',
    'BodyLength',
    'DEFAULT_RULES',
    'check_commit',
    'check_all_rules',
    'validate_message',
]
