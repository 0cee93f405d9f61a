"""Reusable effects and preconditions for building plans.

Effects and preconditions are small closures over a WPCommand. They take
the runner and the RunContext at execution time, so every lookup reflects
live WordPress state rather than anything cached while the plan was built.
"""

import logging
from typing import Any, Callable

from woo_test_env.connector.wpcli import CommandRunner
from woo_test_env.errors import CommandError, ResourceNotFoundError
from woo_test_env.model import command as wp
from woo_test_env.model.command import WPCommand
from woo_test_env.model.plan import Effect, Precondition, RunContext, Skip

logger = logging.getLogger(__name__)

BLOCKS_ACTIVE = "blocks_active"


def run(cmd: WPCommand) -> Effect:
    """Effect that runs one command and fails the action on a non-zero exit."""

    def effect(runner: CommandRunner, ctx: RunContext) -> None:
        runner.run(cmd)

    return effect


def answers_yes(runner: CommandRunner, cmd: WPCommand) -> bool:
    """Run a yes/no command; the exit code is the answer."""
    return runner.run(cmd, fail_on_error=False).success


def query(runner: CommandRunner, cmd: WPCommand) -> list[Any]:
    """Run a list command and always hand back a list."""
    data = runner.run(cmd, parse_json=True).data
    if isinstance(data, list):
        return data
    if data in (None, ""):
        return []
    return [data]


# =========================================================================
# Lookups by title
# =========================================================================


def find_post_id(runner: CommandRunner, title: str, post_type: str = "page") -> int | None:
    """First ID of a post with this exact title, or None.

    Titles are assumed unique on a freshly emptied site.
    """
    for row in query(runner, wp.post_list_by_title(title, post_type)):
        raw = row.get("ID") if isinstance(row, dict) else row
        try:
            return int(raw)
        except (TypeError, ValueError):
            continue
    return None


def resolve_page_id(runner: CommandRunner, title: str) -> int:
    page_id = find_post_id(runner, title)
    if page_id is None:
        raise ResourceNotFoundError(f"No page titled '{title}'")
    return page_id


# =========================================================================
# Preconditions
# =========================================================================


def skip_if_plugin_active(slug: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if answers_yes(runner, wp.plugin_is_active(slug)):
            return Skip(f"plugin {slug} already active")
        return None

    return check


def skip_unless_plugin_active(slug: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if not answers_yes(runner, wp.plugin_is_active(slug)):
            return Skip(f"plugin {slug} not active")
        return None

    return check


def skip_if_theme_active(slug: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if answers_yes(runner, wp.theme_is_active(slug)):
            return Skip(f"theme {slug} already active")
        return None

    return check


def skip_if_option_exists(name: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if answers_yes(runner, wp.option_get(name)):
            return Skip(f"option {name} already set")
        return None

    return check


def skip_unless_option_exists(name: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if not answers_yes(runner, wp.option_get(name)):
            return Skip(f"option {name} not set")
        return None

    return check


def skip_if_post_exists(title: str, post_type: str = "page") -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if find_post_id(runner, title, post_type) is not None:
            return Skip(f"{post_type} '{title}' already exists")
        return None

    return check


def skip_unless_fact(key: str, reason: str) -> Precondition:
    """Gate on something an earlier phase discovered."""

    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        if not ctx.fact(key):
            return Skip(reason)
        return None

    return check


def all_of(*checks: Precondition) -> Precondition:
    """First Skip wins; checks after it are not evaluated."""

    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        for inner in checks:
            skip = inner(runner, ctx)
            if skip is not None:
                return skip
        return None

    return check


# =========================================================================
# Effects
# =========================================================================


def detect_plugin(slug: str, fact: str) -> Effect:
    """Record whether a plugin is active so later phases can branch on it."""

    def effect(runner: CommandRunner, ctx: RunContext) -> RunContext:
        return ctx.with_fact(fact, answers_yes(runner, wp.plugin_is_active(slug)))

    return effect


def create_page(
    title: str,
    content: str | None = None,
    menu_order: int | None = None,
    parent_title: str | None = None,
) -> Effect:
    """Create a published page, attached to a parent looked up by title.

    A missing parent is not an error: the page is created at the top level.
    """

    def effect(runner: CommandRunner, ctx: RunContext) -> None:
        parent = find_post_id(runner, parent_title) if parent_title else None
        runner.run(
            wp.post_create(
                title,
                post_type="page",
                content=content,
                menu_order=menu_order,
                parent=parent,
            )
        )

    return effect


def set_page_option(option: str, title: str) -> Effect:
    """Point an option at a page, re-resolving the page by title now."""

    def effect(runner: CommandRunner, ctx: RunContext) -> None:
        runner.run(wp.option_update(option, resolve_page_id(runner, title)))

    return effect


def delete_each(
    list_cmd: WPCommand,
    delete_cmd: Callable[[Any], WPCommand],
    key: str,
    fact: str,
) -> Effect:
    """Enumerate rows, then delete each by its key field.

    wc list commands return one page at a time, so the listing is repeated
    until it comes back empty. An empty first listing is success with zero
    deletions. A row listed again after its delete raises CommandError.
    """

    def effect(runner: CommandRunner, ctx: RunContext) -> RunContext:
        deleted: set[Any] = set()
        while True:
            idents = [
                row.get(key) if isinstance(row, dict) else row for row in query(runner, list_cmd)
            ]
            idents = [ident for ident in idents if ident not in (None, "")]
            if not idents:
                break
            for ident in idents:
                if ident in deleted:
                    raise CommandError(f"{fact}: {ident} is still listed after delete")
                runner.run(delete_cmd(ident))
                deleted.add(ident)
        logger.info("%s: deleted %d", fact, len(deleted))
        return ctx.with_fact(fact, len(deleted))

    return effect
