"""Command-line entry point for actionselect.

Runs a select prompt over choices given on the command line and prints the
answer (and the action that confirmed it) for use in shell scripts.
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from actionselect import __version__
from actionselect.cli.ui.select_prompt import prompt_select
from actionselect.core.choices import UNSET, Choice, ChoiceEntry, Separator
from actionselect.core.config import Action
from actionselect.core.errors import SelectPromptError
from actionselect.core.theme import get_theme_manager, styled
from actionselect.utils.log import disable_file_logging, enable_file_logging, get_logger


console = Console()
logger = get_logger("cli")

SEPARATOR_TOKEN = "::"


def parse_choice(raw: str) -> ChoiceEntry:
    """Parse ``value``, ``value=Name``, ``!value`` (disabled) or ``::`` (separator)."""
    if raw == SEPARATOR_TOKEN:
        return Separator()
    disabled = raw.startswith("!")
    if disabled:
        raw = raw[1:]
    value, sep, name = raw.partition("=")
    if not value:
        raise click.BadParameter(f"Empty choice value in {raw!r}", param_hint="CHOICES")
    return Choice(value=value, name=name if sep else None, disabled=disabled)


def _parse_actions(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> list[Action]:
    actions = []
    for raw in values:
        parts = raw.split(":", 2)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise click.BadParameter(f"Expected KEY:VALUE[:NAME], got {raw!r}")
        name = parts[2] if len(parts) > 2 else ""
        actions.append(Action(key=parts[0], value=parts[1], name=name))
    return actions


@click.command()
@click.version_option(version=__version__)
@click.argument("choices", nargs=-1, required=True)
@click.option("-m", "--message", default="Select an option", show_default=True, help="Prompt message")
@click.option("--default", "default_value", default=None, help="Value of the choice that starts active")
@click.option(
    "-a",
    "--action",
    "actions",
    multiple=True,
    metavar="KEY:VALUE[:NAME]",
    callback=_parse_actions,
    help="Extra confirmation key, e.g. 'e:edit:Edit' (repeatable)",
)
@click.option("--loop/--no-loop", default=True, show_default=True, help="Wrap around the list ends")
@click.option("--page-size", type=click.IntRange(min=1), default=7, show_default=True)
@click.option("--theme", type=click.Choice(get_theme_manager().list_themes()), default=None, help="Color theme")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write debug logs to this file",
)
def cli(
    choices: Tuple[str, ...],
    message: str,
    default_value: Optional[str],
    actions: list[Action],
    loop: bool,
    page_size: int,
    theme: Optional[str],
    as_json: bool,
    log_file: Optional[Path],
) -> None:
    """Pick one of CHOICES interactively.

    CHOICES are 'value', 'value=Display name', '!value' (disabled) or '::'
    (separator).
    """
    if log_file:
        enable_file_logging(log_file)
    if theme:
        get_theme_manager().set_theme(theme)

    entries = [parse_choice(raw) for raw in choices]
    logger.info(
        "Starting select prompt",
        choice_count=len(entries),
        action_count=len(actions),
        loop=loop,
        theme=get_theme_manager().current.name,
    )

    try:
        result = prompt_select(
            message,
            entries,
            default=default_value if default_value is not None else UNSET,
            loop=loop,
            page_size=page_size,
            actions=actions,
        )
    except SelectPromptError as e:
        logger.warning("Prompt could not start: %s", e)
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    finally:
        if log_file:
            disable_file_logging()

    if as_json:
        payload: dict[str, Any] = {"action": result.action, "answer": result.answer}
        click.echo(json.dumps(payload, default=str))
        return

    answer = styled(escape(str(result.answer)), "answer")
    if result.action is not None:
        action = styled(escape(str(result.action)), "key")
        console.print(f"{action} {answer}")
    else:
        console.print(answer)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except SystemExit:
        raise
    except (RuntimeError, ValueError, TypeError, OSError) as e:
        console.print(f"[red]Fatal error: {escape(str(e))}[/red]")
        logger.warning(
            "Fatal error in main CLI entrypoint: %s: %s",
            type(e).__name__,
            e,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
