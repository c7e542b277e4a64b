import typer

from reelstream.cli.serve import serve
from reelstream.cli.storage import storage_app

app = typer.Typer(
    name="reelstream",
    help="Reelstream CLI: serve catalog media with HTTP range support.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.add_typer(storage_app, name="storage")


def main() -> None:
    app()
