"""Observer pattern for reporting title checks."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .models import ValidationResult
from .title.rules import ALLOWED_TYPES

FORMAT_GUIDE = [
    "Please use the format: <type>(<scope>): <subject>",
    f"The <type> can be: {', '.join(ALLOWED_TYPES)}",
    "There must be exactly one space after the colon, and no space is allowed at the end of the title.",
    "Only displayable ASCII characters are allowed in the title. "
    "The displayable character number range is 32-126 (0x20-0x7E), a total of 95 characters.",
]

STRICT_GUIDE = [
    "Description must start with a lowercase letter",
    "Description must not end with a period",
    "Description must use imperative mood (e.g. \"add\" not \"added\")",
]


def format_report(title: str, result: ValidationResult, strict: bool = True) -> List[str]:
    """Build the lines of the failure report for an invalid title."""
    lines = [
        "Pull request title or latest commit message does not conform to the standard.",
        f"Title: {title}",
        "",
        "Errors:",
    ]
    for number, error in enumerate(result.errors, start=1):
        lines.append(f"  {number}. {error.message}")
        if error.example:
            lines.append(f"     Example: {error.example}")

    lines.append("")
    lines.extend(FORMAT_GUIDE)

    if strict:
        lines.append("")
        lines.append("Strict mode is enabled:")
        lines.extend(f"  - {rule}" for rule in STRICT_GUIDE)
    return lines


class ValidationObserver(ABC):
    """Abstract base class for title check observers."""

    @abstractmethod
    def on_title_validated(self, title: str, result: ValidationResult, strict: bool) -> None:
        """Called once a title has been validated."""
        pass

    @abstractmethod
    def on_source_error(self, message: str) -> None:
        """Called when no check could run (no title, bad configuration)."""
        pass


class ConsoleReportObserver(ValidationObserver):
    """Observer that reports results to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_title_validated(self, title: str, result: ValidationResult, strict: bool) -> None:
        if result.is_valid:
            self.console.print(
                "[green]Pull request title or latest commit message conforms to the standard[/green]"
            )
            return

        header, *rest = format_report(title, result, strict)
        self.console.print(f"[red]{escape(header)}[/red]")
        for line in rest:
            self.console.print(escape(line))

    def on_source_error(self, message: str) -> None:
        self.console.print(f"[red]Error: {escape(message)}[/red]")


class FileLogObserver(ValidationObserver):
    """Observer that logs title checks to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_title_validated(self, title: str, result: ValidationResult, strict: bool) -> None:
        mode = "strict" if strict else "lenient"
        if result.is_valid:
            self._log(f"PASS ({mode}) {title!r}")
        else:
            codes = ", ".join(code.value for code in result.codes)
            self._log(f"FAIL ({mode}) {title!r}: {codes}")

    def on_source_error(self, message: str) -> None:
        self._log(f"ERROR {message}")
