#!/usr/bin/env python3
"""
Claude CLI Proxy startup script
"""
import sys
import logging
import uvicorn

from claude_cli_proxy.core.config import HOST, PORT, LOG_LEVEL_FROM_ENV
from claude_cli_proxy.main import app

logger = logging.getLogger("ClaudeCliProxy.Runner")


def main():
    try:
        logger.info("Starting Claude CLI Proxy server...")
        logger.info(f"Host: {HOST}, Port: {PORT}")
        logger.info(f"Log Level: {LOG_LEVEL_FROM_ENV}")

        uvicorn.run(
            app,
            host=HOST,
            port=PORT,
            log_level=LOG_LEVEL_FROM_ENV.lower(),
            access_log=True,
            use_colors=True,
            loop="asyncio"
        )

    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user (Ctrl+C)")
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
