"""Main script for running the FactSphere terminal client."""

import asyncio
import logging

from dotenv import load_dotenv
from rich.console import Console

from .domain.models.fact import ALL_CATEGORIES, VoteKind, category_names
from .infrastructure.config import FactSphereConfig
from .infrastructure.dependencies import ServiceContainer
from .presentation.console import (
    APP_TITLE,
    LOADING_MESSAGE,
    ConsoleNotifier,
    render_category_filter,
    render_fact_list,
    render_submission_form,
)

VOTE_ALIASES = {
    "interesting": VoteKind.INTERESTING,
    "mindblowing": VoteKind.MINDBLOWING,
    "false": VoteKind.FALSE,
}

HELP = (
    "Commands: all | <category> | share | vote <id> <interesting|mindblowing|false> "
    "| list | quit"
)


def parse_fact_id(raw: str):
    """Store ids are integers unless they clearly are not."""
    return int(raw) if raw.isdigit() else raw


def show_feed(console: Console, container: ServiceContainer) -> None:
    feed = container.get_fact_feed()
    votes = container.get_vote_coordinator()
    console.print(render_category_filter(feed.category))
    console.print(render_fact_list(feed.facts, votes.is_voting))


async def change_category(console: Console, container: ServiceContainer, category: str) -> None:
    with console.status(LOADING_MESSAGE):
        await container.get_fact_feed().set_category(category)
    show_feed(console, container)


async def share_fact(console: Console, container: ServiceContainer) -> None:
    form = container.get_submission_form()
    if not form.is_open:
        form.toggle()

    form.text = console.input("Share a fact with the world... ")
    form.source = console.input("Trustworthy source... ")
    form.category = console.input(f"Choose category ({', '.join(category_names())}): ").strip().lower()

    fact = await form.submit()
    if fact is None:
        console.print(render_submission_form(form))
        return
    show_feed(console, container)


async def cast_vote(console: Console, container: ServiceContainer, args: list[str]) -> None:
    if len(args) != 2 or args[1] not in VOTE_ALIASES:
        console.print(HELP)
        return

    fact = await container.get_vote_coordinator().cast_vote(
        parse_fact_id(args[0]),
        VOTE_ALIASES[args[1]],
    )
    if fact is not None:
        show_feed(console, container)


async def main():
    """Run the FactSphere terminal client."""
    load_dotenv()
    config = FactSphereConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console = Console()
    console.rule(APP_TITLE)

    container = ServiceContainer(config=config, notifier=ConsoleNotifier(console))
    await container.start()

    try:
        await change_category(console, container, ALL_CATEGORIES)
        console.print(HELP)

        while True:
            command = console.input("\n> ").strip()
            if not command:
                continue

            name, *args = command.split()
            name = name.lower()
            if name in ('quit', 'exit', 'q'):
                break
            elif name == 'list':
                show_feed(console, container)
            elif name == 'share':
                await share_fact(console, container)
            elif name == 'vote':
                await cast_vote(console, container, args)
            elif name == ALL_CATEGORIES or name in category_names():
                await change_category(console, container, name)
            else:
                console.print(HELP)

    finally:
        # Clean up
        await container.shutdown()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
