"""Convert command - Stream a CSV or JSONL file into an XML document.

This module is a thin adapter between Click and the application layer's
ConvertRecordsUseCase. It parses the CLI arguments, merges them over the
loaded configuration, runs the use case and presents the result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ConvertRequest
from ...config import ConfigLoader, WriterConfig
from ...constants import SourceFormats
from ...domain.entities.record import ArrayEncodingPolicy
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter, SummaryRequest

console = Console()


@dataclass(frozen=True)
class ConvertCommandOptions:
    config_file: Path | None
    source_format: str | None
    root_element: str | None
    record_element: str | None
    array_policy: str | None
    batch_size: int | None
    has_header: bool
    validate_output: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ConvertCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            source_format=cast("str | None", options.get("source_format")),
            root_element=cast("str | None", options.get("root_element")),
            record_element=cast("str | None", options.get("record_element")),
            array_policy=cast("str | None", options.get("array_policy")),
            batch_size=cast("int | None", options.get("batch_size")),
            has_header=cast("bool", options["has_header"]),
            validate_output=cast("bool", options["validate_output"]),
            verbose=cast("int", options["verbose"]),
        )

    def apply_to(self, config: WriterConfig) -> WriterConfig:
        return replace(
            config,
            root_element_name=self.root_element or config.root_element_name,
            element_name=self.record_element or config.element_name,
            array_policy=(
                ArrayEncodingPolicy.from_name(self.array_policy)
                if self.array_policy
                else config.array_policy
            ),
            batch_size=(
                self.batch_size if self.batch_size is not None else config.batch_size
            ),
        )


def detect_source_format(source: Path, explicit: str | None) -> str:
    if explicit:
        return explicit
    detected = SourceFormats.SUFFIXES.get(source.suffix.lower())
    if detected is None:
        raise click.UsageError(
            f"Cannot infer the input format from '{source.name}'; "
            f"pass --format ({', '.join(SourceFormats.SUPPORTED)})"
        )
    return detected


@click.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a streaming_xml.toml config file (default: ./streaming_xml.toml)",
)
@click.option(
    "--format",
    "source_format",
    type=click.Choice(list(SourceFormats.SUPPORTED)),
    help="Input format (default: inferred from the file suffix)",
)
@click.option("--root", "root_element", help="Root element name (default: data)")
@click.option(
    "--element", "record_element", help="Element name for each record (default: item)"
)
@click.option(
    "--array-policy",
    type=click.Choice([policy.value for policy in ArrayEncodingPolicy]),
    help="repeat: one sibling element per list item; indexed: <item_N> children",
)
@click.option(
    "--batch-size",
    type=click.IntRange(min=1),
    help="Records handed to the writer per batch (1 disables batching)",
)
@click.option(
    "--header/--no-header",
    "has_header",
    default=True,
    show_default=True,
    help="Whether the first CSV row holds column names",
)
@click.option(
    "--validate/--no-validate",
    "validate_output",
    default=True,
    show_default=True,
    help="Re-parse the output file to check it is well-formed",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def convert_command(source: Path, output: Path, **options: object) -> None:
    """Stream records from SOURCE (CSV or JSONL) into the XML file OUTPUT.

    Records are written one at a time and flushed as they go, so memory use
    stays flat regardless of the input size.

    Examples:

    \b
        # JSON Lines to XML, one <document> per line
        streaming-xml convert events.jsonl events.xml --root documents --element document

    \b
        # CSV to XML with indexed list children
        streaming-xml convert users.csv users.xml --array-policy indexed
    """
    command_options = ConvertCommandOptions.from_kwargs(dict(options))
    source_format = detect_source_format(source, command_options.source_format)
    try:
        config = command_options.apply_to(
            ConfigLoader.load(config_file=command_options.config_file)
        )
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    request = ConvertRequest(
        source=source,
        output=output,
        source_format=source_format,
        root_element_name=config.root_element_name,
        element_name=config.element_name,
        array_policy=config.array_policy,
        batch_size=config.batch_size,
        progress_interval=config.progress_interval,
        validate_output=command_options.validate_output,
        verbose=command_options.verbose,
    )

    container = DependencyContainer(
        verbose=command_options.verbose,
        console=console,
        config=config,
        csv_has_header=command_options.has_header,
    )
    use_case = container.create_conversion_use_case()
    response = use_case.execute(request)

    presenter = SummaryPresenter(console)
    presenter.present(
        SummaryRequest(
            response=response,
            root_element_name=config.root_element_name,
            element_name=config.element_name,
            array_policy=config.array_policy.value,
            batch_size=config.batch_size,
        )
    )
    container.create_logger().log_final_stats()

    if not response.success or response.has_errors:
        raise click.ClickException("Conversion completed with errors")
