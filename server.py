"""Run the Lions team hub API with uvicorn."""

from __future__ import annotations

import os

import uvicorn
from dotenv import load_dotenv

from lions_team.app import create_app
from utils.sentry import init_sentry

load_dotenv()


def main() -> None:
    init_sentry()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
