"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdcorpus.cli.commands import check_cmd, index_cmd, list_cmd, main_callback


app = typer.Typer(name="mdcorpus", no_args_is_help=True, help="Static-site content corpus queries")

app.callback()(main_callback)
app.command(name="list")(list_cmd)
app.command(name="check")(check_cmd)
app.command(name="index")(index_cmd)
