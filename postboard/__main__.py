"""Run the API with uvicorn: `python -m postboard`."""

import uvicorn

from postboard.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "postboard.main:app",
        host=settings.host,
        port=settings.port,
        access_log=True,
    )


if __name__ == "__main__":
    main()
