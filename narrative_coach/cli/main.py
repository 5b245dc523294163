"""CLI interface for Narrative Coach"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from narrative_coach.api import Action, analyze
from narrative_coach.validation import ValidationError


console = Console()
error_console = Console(stderr=True)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.yaml"""
    config_path = config_path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        error_console.print(f"[yellow]Warning: Config file not found at {config_path}[/yellow]")
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich"""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True
    )


def load_request(scenes_path: Path) -> Any:
    """
    Read a scenes file (JSON or YAML).

    The file holds either a list of scenes or a request body with
    "scenes" and optionally "action". Files ending in .json are parsed
    as JSON, anything else as YAML.
    """
    with open(scenes_path, "r", encoding="utf-8") as f:
        if scenes_path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


@click.command()
@click.argument(
    "scenes_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--action",
    type=click.Choice([a.value for a in Action], case_sensitive=False),
    help="Analysis to run (defaults to the request file's action, then the config)"
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the JSON result to this file instead of the console"
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to config file"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides config)"
)
def main(
    scenes_file: Path,
    action: Optional[str],
    output: Optional[Path],
    config: Optional[Path],
    log_level: Optional[str]
):
    """Narrative Coach - analyze the structure of a story's scenes"""

    app_config = load_config(config)
    setup_logging(log_level or (app_config.get("logging") or {}).get("level", "WARNING"))

    try:
        request = load_request(scenes_file)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        console.print(f"[red]Could not parse {scenes_file}: {e}[/red]")
        raise click.exceptions.Exit(1)

    if isinstance(request, dict):
        scenes = request.get("scenes")
        action = action or request.get("action")
    else:
        scenes = request

    action = action or (app_config.get("analysis") or {}).get("default_action", Action.FULL_ANALYSIS.value)

    logger.debug(f"Running {action} on {scenes_file}")

    try:
        result = analyze(scenes, str(action).lower())
    except ValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise click.exceptions.Exit(1)
    except Exception as e:
        logger.error(f"Analysis of {scenes_file} failed: {e}", exc_info=True)
        raise

    indent = (app_config.get("output") or {}).get("indent", 2)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(result, indent=indent), encoding="utf-8")
        console.print(f"[green]Saved {action} result to[/green] [cyan]{output}[/cyan]")
        return

    console.print_json(data=result, indent=indent)


if __name__ == "__main__":
    main()
