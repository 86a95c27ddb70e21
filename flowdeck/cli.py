"""Command line interface for browsing workflow definitions."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer

from flowdeck.clients import get_client
from flowdeck.contracts import FilterSet, SortSpec
from flowdeck.dashboard import WorkflowDashboard
from flowdeck.view import render_table

app = typer.Typer(help="CLI for browsing workflow definitions")

workflows_app = typer.Typer(help="Commands for browsing workflows")

app.add_typer(workflows_app, name="workflows")

BROWSE_PROMPT = "[n]ext [p]revious [s]earch [f]ilter [o]rder [r]eload [q]uit"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """flowdeck CLI entry point."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_dashboard(
    search: str,
    category: Optional[int],
    status: Optional[int],
    sort: Optional[str],
    ascending: bool,
) -> WorkflowDashboard:
    try:
        sort_spec = SortSpec(
            field=sort or None, direction="ascending" if ascending else "descending"
        )
    except ValueError:
        raise typer.BadParameter(f"Cannot sort by unknown column: {sort}")
    try:
        client = get_client()
    except ValueError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)
    filters = FilterSet(search_text=search, category=category, status=status)
    return WorkflowDashboard(client, sort=sort_spec, filters=filters)


def _render(dashboard: WorkflowDashboard) -> None:
    if dashboard.error:
        typer.secho(dashboard.error, fg=typer.colors.RED)
        return
    if dashboard.page.total_count:
        typer.echo(render_table(dashboard.visible_records, dashboard.sort))
    typer.echo(dashboard.summary())


def _optional_code(raw: str) -> Optional[int]:
    raw = raw.strip()
    return int(raw) if raw else None


async def _goto_page(dashboard: WorkflowDashboard, page: int) -> None:
    if not await dashboard.load():
        return
    while dashboard.page.current_page < page:
        if not await dashboard.next_page():
            break


@workflows_app.command("list")
def workflows_list(
    search: str = typer.Option("", help="Match against name or unique name"),
    category: Optional[int] = typer.Option(None, help="Category code, -1 for all"),
    status: Optional[int] = typer.Option(None, help="Status code (0 draft, 1 activated)"),
    sort: Optional[str] = typer.Option("modifiedon", help="Column to sort by"),
    ascending: bool = typer.Option(False, help="Sort ascending instead of descending"),
    page: int = typer.Option(1, min=1, help="Page number to show"),
) -> None:
    """
    Print one page of workflows.

    Fetches the first page for the given filters and follows the server's
    next-page links until the requested page is reached or no pages remain.

    Example:
        flowdeck workflows list --search invoice --status 1
        flowdeck workflows list --sort name --ascending --page 3
    """
    dashboard = _build_dashboard(search, category, status, sort, ascending)
    asyncio.run(_goto_page(dashboard, page))
    _render(dashboard)
    if dashboard.error:
        raise typer.Exit(code=1)


@workflows_app.command("browse")
def workflows_browse(
    search: str = typer.Option("", help="Match against name or unique name"),
    category: Optional[int] = typer.Option(None, help="Category code, -1 for all"),
    status: Optional[int] = typer.Option(None, help="Status code (0 draft, 1 activated)"),
    sort: Optional[str] = typer.Option("modifiedon", help="Column to sort by"),
    ascending: bool = typer.Option(False, help="Sort ascending instead of descending"),
) -> None:
    """
    Page through workflows interactively.

    Example:
        flowdeck workflows browse --category 5
        # n: next page, p: previous page, s: new search, f: category and status,
        # o: sort by column, r: reload, q: quit
    """
    dashboard = _build_dashboard(search, category, status, sort, ascending)
    asyncio.run(dashboard.load())

    while True:
        _render(dashboard)
        action = typer.prompt(BROWSE_PROMPT, default="q").strip().lower()
        if action == "q":
            break
        if action == "n":
            if not asyncio.run(dashboard.next_page()) and not dashboard.error:
                typer.echo("Already on the last page.")
        elif action == "p":
            if not asyncio.run(dashboard.previous_page()) and not dashboard.error:
                typer.echo("Already on the first page.")
        elif action == "s":
            text = typer.prompt("Search", default="", show_default=False)
            dashboard.edit_filters(search_text=text)
            asyncio.run(dashboard.apply_filters())
        elif action == "f":
            try:
                category = _optional_code(
                    typer.prompt("Category (blank for all)", default="", show_default=False)
                )
                status = _optional_code(
                    typer.prompt("Status (blank for all)", default="", show_default=False)
                )
            except ValueError:
                typer.secho(
                    "Category and status must be numeric codes", fg=typer.colors.RED
                )
                continue
            dashboard.edit_filters(category=category, status=status)
            asyncio.run(dashboard.apply_filters())
        elif action == "o":
            field = typer.prompt("Sort column").strip()
            try:
                asyncio.run(dashboard.sort_by(field))
            except ValueError:
                typer.secho(f"Cannot sort by unknown column: {field}", fg=typer.colors.RED)
        elif action == "r":
            asyncio.run(dashboard.load())
        else:
            typer.echo(f"Unknown action: {action}")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
