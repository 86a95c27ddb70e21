"""Walk through the first pages of activated modern flows."""

import asyncio
import logging

from flowdeck import WorkflowDashboard, get_client
from flowdeck.view import render_table


async def main():
    """Basic dashboard example."""
    logging.basicConfig(level=logging.INFO)

    # Client settings come from config.yaml or FLOWDECK_* variables
    dashboard = WorkflowDashboard(get_client())

    dashboard.edit_filters(category=5, status=1)
    if not await dashboard.apply_filters():
        print(dashboard.error)
        return

    print(render_table(dashboard.visible_records, dashboard.sort))
    print(dashboard.summary())

    while dashboard.page.has_next and dashboard.page.current_page < 3:
        await dashboard.next_page()
        print(dashboard.summary())

    await dashboard.previous_page()
    print(f"Back on page {dashboard.page.current_page}")


if __name__ == "__main__":
    asyncio.run(main())
