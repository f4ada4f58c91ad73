#!/usr/bin/env python3

import rich_click as click

# Configure rich-click to enable markup - MUST be first!
click.rich_click.USE_RICH_MARKUP = True

click.rich_click.STYLE_OPTION = "#ff79c6"
click.rich_click.STYLE_ARGUMENT = "#8be9fd"
click.rich_click.STYLE_COMMAND = "#50fa7b"
click.rich_click.STYLE_USAGE = "#bd93f9"
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"

"""
oa-format - run named text-filter pipelines over patent office correspondence
"""

import json
import os
import sys

from rich.console import Console

from . import __version__
from .app_hooks import on_format, on_list
from .core.config import reset_config


@click.command(context_settings={"allow_extra_args": False})
@click.version_option(version=__version__, prog_name="oa-format")
@click.argument("file", type=click.File("r", encoding="utf-8"), required=False)
@click.option("--pipeline", "-p", "pipelines", multiple=True, help="Pipeline to run; repeat to chain several")
@click.option("--continue-on-error", is_flag=True, help="Skip a failing pipeline instead of aborting")
@click.option("--json", "as_json", is_flag=True, help="Output JSON format (default: plain text)")
@click.option("--list", "list_pipelines", is_flag=True, help="List registered pipelines and exit")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Configuration file path")
def main(file, pipelines, continue_on_error, as_json, list_pipelines, config_path):
    """[bold cyan]oa-format[/bold cyan] - reformat pasted office action text

    \b
    Reads FILE (or stdin), runs the selected pipelines in order and prints
    the result.

    \b
    [bold yellow]Examples:[/bold yellow]
      [green]oa-format notice.txt[/green]                 [italic]# default pipelines (init)[/italic]
      [green]pbpaste | oa-format -p init --json[/green]   [italic]# JSON result[/italic]
      [green]oa-format --list[/green]                     [italic]# registered pipelines[/italic]
    """
    console = Console(stderr=True)

    if config_path:
        os.environ["OA_FORMATTER_CONFIG"] = config_path
        reset_config()

    if list_pipelines:
        result = on_list()
        if as_json:
            click.echo(json.dumps(result, ensure_ascii=False))
        else:
            for info in result["pipelines"]:
                click.echo(f"{info['name']}\t{info['enabled_steps']}/{info['steps']} steps")
        return

    text = (file or sys.stdin).read()
    result = on_format(text, pipelines=list(pipelines), continue_on_error=continue_on_error)

    if as_json:
        click.echo(json.dumps(result, ensure_ascii=False))
    elif result["success"]:
        click.echo(result["text"], nl=False)
    else:
        console.print(f"[red]Error:[/red] {result['message']}")

    if not result["success"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
