"""Run the API server with uvicorn on the configured host and port."""

import uvicorn

from incalink.config import get_settings
from incalink.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
