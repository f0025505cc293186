import click

from .commands.convert import convert_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    pass


app.add_command(convert_command, name="convert")
app.add_command(validate_command, name="validate")
__all__ = ["app"]
