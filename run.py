#!/usr/bin/env python3
"""
Entry point for the Movies Library API.
Loads settings from the environment (or .env) and runs uvicorn programmatically.
"""
import logging
import sys

from movies_lib.server import main

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.error(f"Error starting application: {e}", exc_info=True)
        sys.exit(1)
