"""Run the API server and the sync engine in one process."""

import logging

import uvicorn

from blocktrail.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s - %(message)s",
    )
    uvicorn.run(
        "blocktrail.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
