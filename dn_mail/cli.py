import typer

from . import config, markdown
from .aliases import AliasFileError, load_aliases
from .completion import complete as complete_address
from .settings import MailBufferSettings

app = typer.Typer(
    name="dn-mail",
    help="Address completion and buffer settings for mail composition",
    no_args_is_help=True,
    add_completion=False,
)


def _warn(msg: str) -> None:
    typer.echo(msg, err=True)


@app.command()
def complete(
    line: str,
    col: int = typer.Option(None, "--col", "-c", help="Cursor column (default: end of line)"),
    alias_file: str = typer.Option(None, "--alias-file", "-a"),
):
    """Complete the address under the cursor in a header line"""
    if col is None:
        col = len(line)

    result = complete_address(line, col, alias_file=alias_file, warn=_warn)
    if result is None:
        raise typer.Exit(1)

    typer.echo(result.start)
    for candidate in result.candidates:
        typer.echo(candidate)


@app.command()
def aliases(alias_file: str = typer.Option(None, "--alias-file", "-a")):
    """List addresses parsed from the alias file"""
    path = config.get_alias_file(alias_file)
    try:
        records = load_aliases(path)
    except AliasFileError as e:
        _warn(str(e))
        raise typer.Exit(1) from None

    for r in records:
        comment = f" | {r.comment}" if r.comment else ""
        typer.echo(f"{r.key} | {r.entry}{comment}")


@app.command("config")
def show_config(alias_file: str = typer.Option(None, "--alias-file", "-a", help="Store alias file path")):
    """Show or set the alias file location"""
    if alias_file:
        config.set_alias_file(alias_file)
        typer.echo(f"Alias file set: {config.get_alias_file()}")
        return

    path = config.get_alias_file()
    state = "" if path.exists() else " (missing)"
    typer.echo(f"Config: {config.CONFIG_PATH}")
    typer.echo(f"Alias file: {path}{state}")


@app.command()
def settings(with_markdown: bool = typer.Option(False, "--markdown", help="Include markdown body syntax")):
    """Print setlocal commands for mail buffers"""
    try:
        prefs = MailBufferSettings.from_config()
    except ValueError as e:
        _warn(str(e))
        raise typer.Exit(1) from None

    for command in prefs.setlocal_commands():
        typer.echo(command)

    if with_markdown:
        markdown.MarkdownToggle().apply("cli", typer.echo, notify=typer.echo)


def main():
    app()


if __name__ == "__main__":
    main()
