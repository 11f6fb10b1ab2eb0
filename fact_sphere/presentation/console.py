"""Terminal rendering of the fact feed with rich."""

from typing import Callable, Iterable, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..domain.models.fact import (
    ALL_CATEGORIES,
    CATEGORY_COLORS,
    MAX_FACT_LENGTH,
    Fact,
    FactId,
)
from ..domain.services.submission_service import FactSubmissionForm

APP_TITLE = "FactSphere"
LOADING_MESSAGE = "Loading..."
EMPTY_MESSAGE = "No facts for this category yet. Create the first one!"
DISPUTED_MARKER = "[⛔ DISPUTED] "


class ConsoleNotifier:
    """Notifier printing blocking alerts to the console."""

    def __init__(self, console: Console):
        self._console = console

    def alert(self, message: str) -> None:
        self._console.print(Panel(Text(message, style="bold red"), title="Alert"))


def render_category_filter(active: str = ALL_CATEGORIES) -> Text:
    """Render the category selector, marking the active category."""
    line = Text()
    style = "bold reverse" if active == ALL_CATEGORIES else "bold"
    line.append(f" {ALL_CATEGORIES.upper()} ", style=style)
    for category, color in CATEGORY_COLORS.items():
        line.append(" ")
        style = f"bold white on {color}"
        if category.value == active:
            style += " underline"
        line.append(f" {category.value} ", style=style)
    return line


def render_fact(fact: Fact, is_voting: bool = False) -> Text:
    """Render one fact with its counters."""
    line = Text()
    if fact.is_disputed:
        line.append(DISPUTED_MARKER, style="bold red")
    line.append(fact.text)
    line.append(" ")
    line.append("(Source)", style=f"link {fact.source} underline")
    line.append("  ")
    line.append(f" {fact.category.value} ", style=f"bold white on {fact.color}")
    line.append(
        f"  👍 {fact.votes_interesting}  🤯 {fact.votes_mindblowing}  ⛔️ {fact.votes_false}"
    )
    if is_voting:
        line.append("  voting...", style="dim italic")
    return line


def render_fact_list(
    facts: Iterable[Fact],
    is_voting: Optional[Callable[[FactId], bool]] = None,
):
    """Render the fact list or the empty-state message."""
    facts = list(facts)
    if not facts:
        return Text(EMPTY_MESSAGE, style="italic")

    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Fact")
    for fact in facts:
        voting = is_voting(fact.id) if is_voting else False
        table.add_row(str(fact.id), render_fact(fact, voting))

    footer = Text(f"There are {len(facts)} facts in the database. Add your own!")
    return Group(table, footer)


def render_submission_form(form: FactSubmissionForm) -> Panel:
    """Render the submission panel with its draft fields."""
    body = Text()
    if form.error:
        body.append(f"☠ {form.error}\n", style="bold red")
    body.append(f"Fact: {form.text or 'Share a fact with the world...'}\n")
    remaining = form.remaining_characters
    body.append(
        f"{remaining}/{MAX_FACT_LENGTH} characters left\n",
        style="red" if remaining < 0 else "dim",
    )
    body.append(f"Source: {form.source or 'Trustworthy source...'}\n")
    body.append(f"Category: {form.category or 'Choose category:'}\n")
    body.append("Posting..." if form.is_uploading else "Post", style="bold")
    return Panel(body, title="Share a fact")
