"""World News API exposed as MCP tools over stdio and HTTP."""

__version__ = "1.0.0"
