"""MCP server exposing studiosim channels as tools."""
