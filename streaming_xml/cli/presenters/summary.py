from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import ConvertResponse, ValidationResult


@dataclass(frozen=True, slots=True)
class SummaryRequest:
    response: ConvertResponse
    root_element_name: str
    element_name: str
    array_policy: str
    batch_size: int


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: SummaryRequest) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(request))
        validation = request.response.validation
        if validation is not None:
            self.console.print(self._build_validation_table(validation))
        self.console.print()
        self._print_status(request.response)

    def _build_summary_table(self, request: SummaryRequest) -> Table:
        response = request.response
        table = Table(
            title="Conversion Summary",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="white", overflow="fold")
        summary = response.summary
        if summary is not None:
            table.add_row("Source", f"{summary.source} ({summary.source_format})")
        table.add_row("Output", str(response.output or ""))
        table.add_row("Root element", f"<{request.root_element_name}>")
        table.add_row("Record element", f"<{request.element_name}>")
        table.add_row("Array policy", request.array_policy)
        table.add_row("Batch size", f"{request.batch_size:,}")
        table.add_section()
        table.add_row(
            "[bold]Records[/bold]",
            f"[bold yellow]{response.records_written:,}[/bold yellow]",
        )
        if response.skipped_lines:
            table.add_row("Skipped lines", f"[yellow]{response.skipped_lines:,}[/yellow]")
        if summary is not None:
            table.add_row("Output size", f"{summary.output_bytes / 1024:,.1f} KB")
            table.add_row("Elapsed", f"{summary.elapsed_seconds:.2f}s")
            table.add_row("Rate", f"{summary.records_per_second:,.0f} records/s")
        return table

    def _build_validation_table(self, validation: ValidationResult) -> Table:
        table = Table(title="Validation", show_header=True, header_style="bold cyan")
        table.add_column("Check", style="cyan", no_wrap=True)
        table.add_column("Result")
        status = "[green]✓ valid[/green]" if validation.is_valid else "[red]✗ invalid[/red]"
        table.add_row("Method", validation.method)
        table.add_row("Status", status)
        if validation.root_element:
            table.add_row("Root element", f"<{validation.root_element}>")
        if validation.method == "parser":
            table.add_row("Child elements", f"{validation.child_count:,}")
        for message in validation.errors:
            table.add_row("Error", f"[red]{message}[/red]")
        return table

    def _print_status(self, response: ConvertResponse) -> None:
        if response.success:
            self.console.print("[bold green]✓ Conversion completed[/bold green]")
            return
        self.console.print("[bold red]✗ Conversion failed[/bold red]")
        if response.error:
            self.console.print(f"  [red]{response.error}[/red]")
