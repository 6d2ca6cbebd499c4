"""Allow running the MCP server as a module.

Usage:
    python -m payroll.mcp        # starts the MCP server in stdio mode
"""

from payroll.mcp.server import mcp

if __name__ == "__main__":
    mcp.run()
