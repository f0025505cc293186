"""Validate command - Check that an XML file is well-formed."""

from __future__ import annotations

from pathlib import Path

import click

from ...infrastructure.container import DependencyContainer


@click.command()
@click.argument("xml_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--basic",
    is_flag=True,
    help="Only check the XML declaration and opening/closing tag balance",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def validate_command(xml_file: Path, basic: bool, verbose: int) -> None:
    """Validate that XML_FILE is a well-formed XML document.

    By default the file is fully re-parsed (incrementally, so large files are
    fine). With --basic only a tag-balance check is performed.

    Examples:

    \b
        streaming-xml validate output/users.xml
        streaming-xml validate output/users.xml --basic
    """
    container = DependencyContainer(verbose=verbose)
    logger = container.create_logger()
    logger.verbose(f"Validating {xml_file}")
    result = container.create_validator(basic=basic).validate(xml_file)
    logger.log_validation_result(result)
    if not result.is_valid:
        raise click.ClickException(f"{xml_file.name} is not well-formed")
