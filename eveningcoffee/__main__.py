"""
Standalone server: `python -m eveningcoffee` (or the `eveningcoffee` script).

Runs the module-level app from eveningcoffee.main with uvicorn, bound to the
HOST/PORT settings. Set EMBEDDED_MODE=true to serve the API under
/api/{APP_ID} as a host server would.
"""

import uvicorn

from eveningcoffee.config import settings


def main() -> None:
    uvicorn.run(
        "eveningcoffee.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
