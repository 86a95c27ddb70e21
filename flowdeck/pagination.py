"""Cursor-stack transitions over :class:`PageState`.

The data API only hands out a forward cursor, so backward navigation
re-issues the request URL recorded for the earlier page. Every function
returns a new state and leaves its input untouched.
"""

from __future__ import annotations

from typing import Optional

from .contracts import PageState, WorkflowPage


def start_query(result: WorkflowPage) -> PageState:
    """State for the first page of a new query."""
    return PageState(
        current_page=1,
        cursor_stack=(result.request_url,),
        next_cursor=result.next_cursor,
        total_count=result.total_count,
    )


def advance(state: PageState, result: WorkflowPage) -> PageState:
    """State after ``result`` was fetched from ``state.next_cursor``."""
    return PageState(
        current_page=state.current_page + 1,
        cursor_stack=state.cursor_stack + (result.request_url,),
        next_cursor=result.next_cursor,
        total_count=result.total_count,
    )


def previous_locator(state: PageState) -> Optional[str]:
    """Request URL of the page before the current one."""
    if state.current_page <= 1 or len(state.cursor_stack) < 2:
        return None
    return state.cursor_stack[-2]


def retreat(state: PageState, result: WorkflowPage) -> PageState:
    """State after ``result`` was re-fetched from :func:`previous_locator`."""
    if len(state.cursor_stack) < 2:
        raise ValueError("Cannot retreat past the first page")
    return PageState(
        current_page=state.current_page - 1,
        cursor_stack=state.cursor_stack[:-1],
        next_cursor=result.next_cursor,
        total_count=result.total_count,
    )
