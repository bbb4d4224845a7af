"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from mdstore.cli.commands import front_matter_cmd, list_cmd, samples_cmd, show_cmd


app = typer.Typer(name="mdstore", no_args_is_help=True, help="Read-only front-matter document store")


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[Optional[str], typer.Option("--root", help="Content directory (default: config content_dir)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log store activity to stderr")] = False,
    ):
    """Inspect posts and drafts by path."""
    ctx.obj = {"root": root, "verbose": verbose}


app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="front-matter")(front_matter_cmd)
app.command(name="samples")(samples_cmd)
