"""Typer CLI application for create-plugin."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import create_plugin
from create_plugin.adapters import GitRepository, NpmClient, TreeCopier
from create_plugin.cli._prompts import prompt_git, prompt_template
from create_plugin.cli._types import DEFAULT_STARTER, StarterTemplate
from create_plugin.core.config import Options
from create_plugin.core.errors import FetchFailed, InstallFailed, ScaffoldError
from create_plugin.core.pipeline import create_project

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"create-plugin v{create_plugin.__version__}")
        raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """create-plugin: scaffold plugin projects from verified templates."""


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available starter templates")
    _console.print("[dim]│[/]")
    for s in StarterTemplate:
        _console.print(f"[dim]│[/]  [bold cyan]{s.value:<12}[/] [bold]{s.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{s.package}: {s.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _print_step(message: str) -> None:
    _console.print(f"[bold green]◇[/]  {escape(message)}")
    _console.print("[dim]│[/]")


def _report_failure(err: ScaffoldError) -> None:
    _console.print()
    _console.print(f"[bold red]ERROR[/] [cyan]{escape(err.template)}[/]: {escape(str(err))}")
    if isinstance(err, (FetchFailed, InstallFailed)) and err.output:
        _console.print(err.output.rstrip(), style="dim", markup=False, highlight=False)
    _console.print("[bold red]ERROR[/] Cannot continue safely. Exiting...")


@app.command()
def create(
    target_dir: Annotated[
        Path | None,
        Argument(
            help="Directory to create the project in. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    template: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Local template path (starting with '.') or registry package name.",
            show_default=False,
        ),
    ] = None,
    git: Annotated[bool, Option("--git", "-g", help="Initialize plugin with git.")] = False,
    yes: Annotated[bool, Option("--yes", "-y", help="Skip prompts and use defaults.")] = False,
    install: Annotated[
        bool, Option("--install", "-i", help="Install the plugin's dependencies.")
    ] = False,
    npm: Annotated[
        str, Option("--npm", envvar="CREATE_PLUGIN_NPM", help="npm executable to use.")
    ] = "npm",
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List the starter templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new plugin project from a verified template."""
    target = target_dir if target_dir is not None else Path.cwd()

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  create-plugin v{create_plugin.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if template is None:
        starter = DEFAULT_STARTER if yes else prompt_template()
        template = starter.package
    else:
        _console.print("[bold green]◇[/]  Please choose which project template to use")
        _console.print(f"[dim]│[/]  {escape(template)}")
        _console.print("[dim]│[/]")

    if not git and not yes:
        git = prompt_git()

    try:
        options = Options(
            template=template,
            target_directory=target,
            git_init=git,
            skip_prompts=yes,
            run_install=install,
        )
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    npm_client = NpmClient(executable=npm)
    try:
        project = create_project(
            options,
            registry=npm_client,
            installer=npm_client,
            copier=TreeCopier(),
            repository=GitRepository(),
            on_step=_print_step,
        )
    except ScaffoldError as err:
        _report_failure(err)
        raise Exit(code=err.exit_code) from None

    _console.print(f"[bold cyan]●[/]  Done! Project ready in {escape(str(project))}")
    _console.print()
