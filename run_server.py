#!/usr/bin/env python3
"""
UniFi Network MCP server launcher
Serves the UniFi tool catalogue over MCP stdio; configure via UNIFI_BASE_URL / UNIFI_API_KEY
"""
import os

# Fix encoding issues on servers with ASCII locale
os.environ.setdefault('PYTHONIOENCODING', 'utf-8')

from unifi_mcp.server import run

if __name__ == "__main__":
    run()
