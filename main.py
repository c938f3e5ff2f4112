#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Schedule Tracker - dashboard launcher
Usage: python main.py [--host HOST] [--port PORT] [--reload] [--data-dir DIR]

Version: 1.0.0
"""

import argparse
import logging
import os
import sys


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run the Schedule Tracker dashboard')
    parser.add_argument('--host', default=None, help='Server host (DASHBOARD_HOST)')
    parser.add_argument('--port', type=int, default=None, help='Server port (DASHBOARD_PORT)')
    parser.add_argument('--reload', action='store_true', help='Reload on code changes')
    parser.add_argument('--data-dir', default=None, help='Data directory (DATA_DIR)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    # Settings are read at import time, and by the reloader's worker process
    if args.data_dir:
        os.environ['DATA_DIR'] = args.data_dir

    import uvicorn

    from dashboard.config import settings
    from utils.logger import setup_logging

    setup_logging(settings.get_logging_config(), settings.LOGS_DIR if settings.LOG_TO_FILE else None)
    logger = logging.getLogger(__name__)

    host = args.host or settings.DASHBOARD_HOST
    port = args.port or settings.DASHBOARD_PORT

    try:
        uvicorn.run(
            "dashboard.app:app",
            host=host,
            port=port,
            reload=args.reload,
            log_config=None,
        )
    except KeyboardInterrupt:
        logger.info("👋 Dashboard stopped by user")
    except Exception as e:
        logger.error(f"💥 Fatal error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
