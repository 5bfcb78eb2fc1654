# src/cronlint/cli/formatter.py
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cronlint.core.models import Severity, ValidationResult

# Initialize the Rich console for high-quality terminal output
console = Console()


class CronFormatter:
    """
    CronFormatter: renders lint results for the terminal.
    Responsible for the header, the diagnostics table, and the summary panel.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def print_header(self, subtitle: str, version: str):
        self.console.print(Panel.fit(
            f"[bold cyan]CronLint v{version}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def print_diagnostics(self, result: ValidationResult):
        """
        Builds the per-finding table. File-level findings show '-' for the line.
        """
        if not result.diagnostics:
            self.console.print("[bold green]✅ No problems found.[/bold green]")
            return

        table = Table(title="CronLint Findings", show_header=True, header_style="bold magenta")
        table.add_column("File", style="cyan")
        table.add_column("Line", justify="right")
        table.add_column("Severity")
        table.add_column("Message", style="white")

        for d in result.diagnostics:
            color = "red" if d.severity is Severity.HIGH else "yellow"
            table.add_row(
                escape(d.file),
                str(d.line) if d.line is not None else "-",
                f"[{color}]{d.severity.value.upper()}[/{color}]",
                # 'Minute[0]' would otherwise be read as markup
                escape(d.message),
            )

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        result_icon = "✅" if summary["success"] else "❌"
        self.console.print(Panel(
            f"Total Files:     {summary['total_files']}\n"
            f"Clean:           [green]{summary['clean_files']}[/green]\n"
            f"With Errors:     [red]{summary['files_with_errors']}[/red]\n"
            f"Missing:         [yellow]{summary['missing_files']}[/yellow]\n"
            f"Errors/Warnings: {summary['errors']}/{summary['warnings']}",
            title=f"[bold white]Summary Report[/bold white] {result_icon}",
            border_style="dim"
        ))

    def print_json(self, result: ValidationResult):
        # Plain print: rich would wrap long lines and break the JSON
        print(json.dumps(result.to_dict(), indent=2))
