"""
Menu-driver interfaces for the QUWATRO applications.

Each application implements AbstractMenuApp: it declares its numbered actions
and the base class runs the read-dispatch loop. Input arrives through an
explicit LineReader (a `prompt -> line` callable) and output goes to an
injected Rich Console, so a session can be scripted end to end.

Errors raised by an action are reported at the action boundary and the menu
is shown again; end of input closes the menu.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Callable, List, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

from quwatro.domain.validation import FieldValidator
from quwatro.errors import NotFound, QuwatroError, ValidationError
from quwatro.reporter import print_menu
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

LineReader = Callable[[str], str]


@dataclass(frozen=True)
class MenuAction:
    label: str
    handler: Callable[[], None]


@runtime_checkable
class MenuApp(Protocol):
    """
    Common interface of everything the hub can launch.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    title : str
        Heading shown above the menu.
    """

    name: str
    title: str

    def run(self) -> None:
        """Show the menu until the user leaves it or input ends."""
        ...


class AbstractMenuApp(abc.ABC):
    """
    Base class for menu-driven applications.

    Subclasses set `name` and `title` and implement `actions`.
    """

    name: str
    title: str
    exit_label: str = "Back to Modules"
    exit_message: str = "Returning to Main Menu..."

    def __init__(self, read_line: LineReader, console: Console) -> None:
        self.read_line = read_line
        self.console = console

    @abc.abstractmethod
    def actions(self) -> List[MenuAction]:  # pragma: no cover - interface only
        """Menu entries in display order; the exit entry is appended automatically."""
        raise NotImplementedError

    def run(self) -> None:
        actions = self.actions()
        labels = [action.label for action in actions] + [self.exit_label]
        exit_choice = len(labels)

        while True:
            print_menu(self.console, self.title, labels)
            try:
                raw = self.read_line("Enter your choice: ")
            except EOFError:
                return
            choice = raw.strip()
            if not choice:
                continue
            try:
                number = int(choice)
            except ValueError:
                self.console.print("Invalid input. Please enter a number.")
                continue
            if number == exit_choice:
                self.console.print(self.exit_message)
                return
            if not 1 <= number < exit_choice:
                self.console.print(f"Invalid choice. Please enter 1-{exit_choice}.")
                continue
            if not self._dispatch(actions[number - 1]):
                return

    def _dispatch(self, action: MenuAction) -> bool:
        """Run one action; False means input ended and the menu should close."""
        try:
            action.handler()
        except EOFError:
            return False
        except NotFound as exc:
            log.debug("Nothing to show", extra={"app": self.name, "action": action.label})
            self.console.print(f"[yellow]{escape(str(exc))}[/yellow]")
        except QuwatroError as exc:
            log.info(
                "Action failed",
                extra={"app": self.name, "action": action.label, "error": type(exc).__name__},
            )
            self.console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return True

    def ask(self, validator: FieldValidator, field: str, prompt: str) -> Any:
        """Read one value; a ValidationError aborts the current action."""
        return validator.validate(field, self.read_line(prompt))

    def ask_until_valid(self, validator: FieldValidator, field: str, prompt: str) -> Any:
        """Read one value, re-prompting until it validates."""
        while True:
            try:
                return self.ask(validator, field, prompt)
            except ValidationError as exc:
                self.console.print(f"[red]{escape(str(exc))}[/red]")

    def confirm(self, prompt: str) -> bool:
        return self.read_line(prompt).strip().casefold().startswith("y")


__all__ = [
    "LineReader",
    "MenuAction",
    "MenuApp",
    "AbstractMenuApp",
]
