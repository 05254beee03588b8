"""Observer pattern for commit message checks."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console

from .models import GroupError, SingleError

if TYPE_CHECKING:
    from .rules import Rule


class CheckObserver(ABC):
    """Abstract base class for check observers."""

    @abstractmethod
    def on_rule_checked(self, rule: "Rule", error: Optional[SingleError]) -> None:
        """Called after each rule has been evaluated."""
        pass

    @abstractmethod
    def on_check_completed(self, result: Optional[GroupError]) -> None:
        """Called once all rules have been evaluated."""
        pass


def _describe_rule(rule: "Rule", error: Optional[SingleError]) -> str:
    if error is None:
        return f"{rule.name}: passed"
    return (
        f"{rule.name}: failed ({error.error_type.value} "
        f"at byte {error.offset}, length {error.length})"
    )


def _describe_result(result: Optional[GroupError]) -> str:
    if result is None:
        return "Commit message passed all rules"
    return f"Commit message failed with {result}"


class ConsoleLogObserver(CheckObserver):
    """Observer that logs rule outcomes to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def on_rule_checked(self, rule: "Rule", error: Optional[SingleError]) -> None:
        color = "green" if error is None else "yellow"
        self.console.print(
            f"[{color}]{_describe_rule(rule, error)}[/{color}]", highlight=False
        )

    def on_check_completed(self, result: Optional[GroupError]) -> None:
        color = "green" if result is None else "red"
        self.console.print(f"[{color}]{_describe_result(result)}[/{color}]")


class FileLogObserver(CheckObserver):
    """Observer that logs rule outcomes to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_rule_checked(self, rule: "Rule", error: Optional[SingleError]) -> None:
        self._log(_describe_rule(rule, error))

    def on_check_completed(self, result: Optional[GroupError]) -> None:
        self._log(_describe_result(result))
