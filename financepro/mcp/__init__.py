"""MCP tool server exposing the calculation engine."""
