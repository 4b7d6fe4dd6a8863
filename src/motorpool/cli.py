import typer
from typing import Optional
from typing_extensions import Annotated
from structlog import get_logger
from .collection import VehicleCollection
from .config import load_config
from .console import TerminalConsole
from .shell import Shell

log = get_logger()

app = typer.Typer()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, envvar="MOTORPOOL_LOG_LEVEL"),
) -> None:
    overrides = {"log_level": log_level} if log_level else {}
    ctx.obj = load_config(**overrides)


@app.command()
def shell(
    ctx: typer.Context,
    name: Annotated[str, typer.Option(help="Name of the collection.")] = "vehicles",
) -> None:
    config = ctx.obj
    collection = VehicleCollection(name)
    console = TerminalConsole(stop_token=config.stop_token)
    typer.secho("Type 'help' for the list of commands.", fg=typer.colors.GREEN)
    log.info("shell start", collection=collection)
    try:
        Shell(collection, console).run()
    except typer.Abort:
        # end of input
        pass
    typer.secho(f"Bye ({len(collection)} elements).", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
