"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import list_cmd, search_cmd, show_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store with filtered search")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="search")(search_cmd)
