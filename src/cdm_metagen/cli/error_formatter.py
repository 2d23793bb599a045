"""Validation issue formatting with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from cdm_metagen.validation.errors import ValidationIssue, ValidationResult


class ErrorFormatter:
    """Formats validation issues for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def format_validation_result(
        self,
        result: ValidationResult,
        module_name: str | None = None,
    ) -> None:
        """Format and print validation result.

        Args:
        ----
            result: The validation result to format.
            module_name: Generated module the issues belong to (for display).

        """
        if result.is_valid and not result.warnings:
            self.console.print("[green]✓ Validation passed[/green]")
            return

        error_count = len(result.errors)
        warning_count = len(result.warnings)

        self.console.print(self._build_summary(error_count, warning_count, module_name))
        self.console.print()

        for issue in result.errors:
            self._print_issue(issue, "red")

        for issue in result.warnings:
            self._print_issue(issue, "yellow")

        self.console.print()
        if error_count > 0:
            self.console.print(f"[red bold]✗ {error_count} error(s)[/red bold]", end="")
        if warning_count > 0:
            if error_count > 0:
                self.console.print(", ", end="")
            self.console.print(f"[yellow]{warning_count} warning(s)[/yellow]", end="")
        self.console.print()

    def _build_summary(
        self,
        errors: int,
        warnings: int,
        module_name: str | None,
    ) -> Panel:
        """Build summary panel."""
        title = "Validation Failed" if errors > 0 else "Validation Warnings"
        style = "red" if errors > 0 else "yellow"

        content = Text()
        if module_name:
            content.append(f"Module: {module_name}\n", style="dim")

        if errors > 0:
            content.append(f"Errors: {errors}", style="red bold")
        if warnings > 0:
            if errors > 0:
                content.append("  ")
            content.append(f"Warnings: {warnings}", style="yellow")

        return Panel(content, title=title, border_style=style)

    def _print_issue(self, issue: ValidationIssue, color: str) -> None:
        """Print a single issue."""
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}"
        )

        if issue.path:
            self.console.print(f"  [dim]at {issue.path}[/dim]")

        if issue.suggestion:
            self.console.print(f"  [green]💡 {issue.suggestion}[/green]")

        self.console.print()


class ErrorTree:
    """Display issues as a tree grouped by declaration."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error tree formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as tree."""
        tree = Tree("[bold]Validation Issues[/bold]")

        by_decl: dict[str, list[ValidationIssue]] = {}
        for issue in result.issues:
            decl = issue.path.split(".")[0] if issue.path else "general"
            by_decl.setdefault(decl, []).append(issue)

        for decl, issues in sorted(by_decl.items()):
            decl_node = tree.add(f"[cyan]{decl}[/cyan] ({len(issues)} issues)")

            for issue in issues:
                color = "red" if issue.severity.value == "error" else "yellow"
                decl_node.add(f"[{color}]{issue.code}[/{color}] {issue.message}")

        self.console.print(tree)


class ErrorTable:
    """Display issues as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.issues:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            severity = f"[{severity_style}]{issue.severity.value.upper()}[/{severity_style}]"

            table.add_row(issue.code, severity, issue.path or "-", issue.message)

        self.console.print(table)
