from __future__ import annotations

import uvicorn

from alphacut.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("alphacut.main:app", host=settings.host, port=settings.port, reload=False, access_log=False)


if __name__ == "__main__":
    main()
