"""Running rules over a commit message."""
from typing import Iterable, List, Optional, Sequence

from .commit import Commit
from .models import GroupError, SingleError
from .observers import CheckObserver
from .rules import (
    BodyLength,
    HeaderLength,
    NonEmptyBody,
    NonEmptyHeader,
    Rule,
    SingleEmptyLineBeforeBody,
)

DEFAULT_RULES: Sequence[Rule] = (
    NonEmptyHeader(),
    NonEmptyBody(),
    SingleEmptyLineBeforeBody(),
    HeaderLength(),
    BodyLength(),
)


def check_commit(
    commit: Commit,
    rules: Iterable[Rule],
    observers: Iterable[CheckObserver] = (),
) -> Optional[GroupError]:
    """Run every rule against the commit and collect the failures.

    All rules run even after one fails. Errors keep the order of
    ``rules``.

    Returns:
        None if every rule passed, otherwise a GroupError
    """
    observers = list(observers)
    errors: List[SingleError] = []

    for rule in rules:
        error = rule.check(commit)
        if error is not None:
            errors.append(error)
        for observer in observers:
            observer.on_rule_checked(rule, error)

    result = GroupError(source=commit.text, errors=errors) if errors else None
    for observer in observers:
        observer.on_check_completed(result)
    return result


def check_all_rules(
    commit: Commit, observers: Iterable[CheckObserver] = ()
) -> Optional[GroupError]:
    """Check a commit against the standard rule set."""
    return check_commit(commit, DEFAULT_RULES, observers)


def validate_message(
    message: str, observers: Iterable[CheckObserver] = ()
) -> Optional[GroupError]:
    """Check raw message text against the standard rule set."""
    return check_all_rules(Commit(message), observers)
