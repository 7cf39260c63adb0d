"""Command line entry point.

Reads group documents stored as JSON (``{"id", "name", "expenses": [...]}``)
and prints balances or settlements as JSON.
"""

import json
import logging

import click
from pydantic import ValidationError

from .config import SettlementConfig
from .exceptions import OpenSplitError
from .models import Group
from .settlement_optimizer import SettlementOptimizer
from .user_balances import balances_by_group

logger = logging.getLogger(__name__)

GROUP_FILE = click.Path(exists=True, dir_okay=False)


def load_group(path: str) -> Group:
    try:
        with open(path, "r", encoding="utf-8") as group_file:
            document = json.load(group_file)
    except OSError as e:
        raise click.ClickException(f"Could not read {path}: {e.strerror}")
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}")

    try:
        group = Group.model_validate(document)
    except ValidationError as e:
        raise click.ClickException(f"{path} is not a valid group:\n{e}")

    logger.debug("Loaded group %s with %d expenses from %s", group.id, len(group.expenses), path)
    return group


def echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.option("--decimals", type=click.IntRange(0, 6), default=None, help="Round exchanges to this many decimals")
@click.option(
    "--prefer-greedy-on-tie/--prefer-naive-on-tie",
    default=None,
    help="Which algorithm wins when both need as many exchanges",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
@click.pass_context
def main(ctx: click.Context, decimals, prefer_greedy_on_tie, verbose: bool) -> None:
    """Work out who owes whom in a group of shared expenses."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    try:
        config = SettlementConfig.from_env()
    except OpenSplitError as e:
        raise click.ClickException(str(e))

    overrides = {}
    if decimals is not None:
        overrides["decimals"] = decimals
    if prefer_greedy_on_tie is not None:
        overrides["prefer_greedy_on_tie"] = prefer_greedy_on_tie

    ctx.obj = SettlementConfig(**{**config.model_dump(), **overrides})


@main.command()
@click.argument("group_file", type=GROUP_FILE)
def balance(group_file: str) -> None:
    """Net balance of everybody in a group."""
    group = load_group(group_file)
    try:
        echo_json(SettlementOptimizer.calculate_balances(group.expenses))
    except OpenSplitError as e:
        raise click.ClickException(str(e))


@main.command()
@click.argument("group_file", type=GROUP_FILE)
@click.option("--details", is_flag=True, help="Also print balances and the algorithm used")
@click.pass_obj
def exchanges(config: SettlementConfig, group_file: str, details: bool) -> None:
    """Payments that settle a group."""
    group = load_group(group_file)
    try:
        result = SettlementOptimizer.optimize_settlements(group, config)
    except OpenSplitError as e:
        raise click.ClickException(str(e))

    if details:
        echo_json(result.model_dump())
    else:
        echo_json([exchange.model_dump() for exchange in result.exchanges])


@main.command("user-balance")
@click.argument("nick")
@click.argument("group_files", nargs=-1, required=True, type=GROUP_FILE)
def user_balance(nick: str, group_files) -> None:
    """Net balance of one user in every group they take part in."""
    groups = [load_group(path) for path in group_files]

    member_groups = [group for group in groups if group.has_participant(nick)]
    logger.debug("%s takes part in %d of %d groups", nick, len(member_groups), len(groups))

    try:
        echo_json([entry.model_dump() for entry in balances_by_group(nick, member_groups)])
    except OpenSplitError as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
