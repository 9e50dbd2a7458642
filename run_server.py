#!/usr/bin/env python3
"""Development server runner for the galaxy dashboard."""

import uvicorn

from src.server.config import ServerSettings

if __name__ == "__main__":
    settings = ServerSettings.from_env()
    uvicorn.run(
        "src.server.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
