#!/usr/bin/env python3
"""Start the MCP stdio server with Logfire error tracking for startup errors."""

import sys

from publisher.interface.mcp.server import main

if __name__ == "__main__":
    sys.exit(main())
