from __future__ import annotations

import uvicorn

from devkit.config import load_settings

from locator_api.app import SERVICE_NAME


def main() -> None:
    settings = load_settings(SERVICE_NAME)
    uvicorn.run(
        "locator_api.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
