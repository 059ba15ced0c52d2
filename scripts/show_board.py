#!/usr/bin/env python3
"""
JobTrack - Board CLI

Log in against a running API and print your jobs as a list or kanban board.

Usage:
    python scripts/show_board.py user@email.com password [list|kanban]

The API location comes from JOBTRACK_API_URL (default http://localhost:3001).
"""
import asyncio
import sys

from jobtrack.client import ApiError, JobBoard, JobTrackClient
from jobtrack.client.views import render_kanban, render_list


async def show_board(email: str, password: str, layout: str = "kanban"):
    async with JobTrackClient() as client:
        try:
            await client.login(email, password)
        except ApiError as e:
            print(f"Error: {e.message}")
            sys.exit(1)

        board = JobBoard(client)
        await board.load()

        if layout == "list":
            print(render_list(board.list_view()))
        else:
            print(render_kanban(board.kanban_view()))


if __name__ == "__main__":
    if len(sys.argv) not in (3, 4):
        print("Usage: python scripts/show_board.py <email> <password> [list|kanban]")
        print("Example: python scripts/show_board.py user@example.com MyPass123 list")
        sys.exit(1)

    asyncio.run(show_board(*sys.argv[1:]))
