"""Command line entry for the campaign calendar."""

from __future__ import annotations

import logging

import uvicorn

from campaign_calendar.api.main import app
from campaign_calendar.core.config import settings


def run_server() -> None:
    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
