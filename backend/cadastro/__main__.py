"""Run the API with uvicorn: ``python -m cadastro``.

Binds to HOST/PORT from settings. A single worker keeps request handling
on one event loop.
"""

import uvicorn

from cadastro.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "cadastro.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
    )


if __name__ == "__main__":
    main()
