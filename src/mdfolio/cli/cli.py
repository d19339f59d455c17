"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdfolio.cli.commands import build_cmd, posts_cmd, projects_cmd, show_cmd


app = typer.Typer(name="mdfolio", no_args_is_help=True, help="Markdown content to JSON manifest generator")

app.command(name="build")(build_cmd)
app.command(name="posts")(posts_cmd)
app.command(name="projects")(projects_cmd)
app.command(name="show")(show_cmd)
