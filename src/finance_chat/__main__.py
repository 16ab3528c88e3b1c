"""Entry point for `python -m finance_chat`."""

import uvicorn

from .config import settings


def main():
    uvicorn.run(
        "finance_chat.app:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
