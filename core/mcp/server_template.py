"""
Quantum Bookstore MCP Server Template: FastMCP Pattern

Every MCP server in the project is built the same way:
- One factory call for a named FastMCP instance
- A health_check tool on every server
- Domain tools registered by the vertical, returning plain dicts
"""
from fastmcp import FastMCP
from datetime import datetime, timezone


def create_mcp_server(
    name: str,
    instructions: str = "",
) -> FastMCP:
    """Factory for creating MCP servers with standard config."""
    mcp = FastMCP(name, instructions=instructions or None)

    # Register health check tool (all servers get this)
    @mcp.tool()
    def health_check() -> dict:
        """Check if this MCP server is operational."""
        return {
            "server": name,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return mcp
