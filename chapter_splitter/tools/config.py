"""
Config tool: CLI subapp only. Implementation in chapter_splitter.config.
"""

import typer

from chapter_splitter import config as config_module

config_app = typer.Typer(help="Split defaults stored in .chapter_splitter.json.")


@config_app.command("show")
def _show() -> None:
    """Show the config file in use and the resolved settings."""
    path = config_module.find_config_file()
    if path is None:
        typer.echo(f"Config file: {config_module.get_config_path()} (not found; using defaults)")
    else:
        typer.echo(f"Config file: {path}")
    settings = config_module.load_config(path)
    for key, value in settings.model_dump().items():
        typer.echo(f"{key}: {value}")


@config_app.command("set")
def _set(
    key: str = typer.Argument(..., help="Setting name (e.g. depth, complete, chapters_dir)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set one default and save the config file."""
    result = config_module.set_config_value(key, value)
    if not result["ok"]:
        typer.echo(result["error"], err=True)
        raise typer.Exit(1)
    typer.echo(f"{key} set to: {getattr(result['settings'], key)}")
    typer.echo(f"Saved to: {result['path']}")
