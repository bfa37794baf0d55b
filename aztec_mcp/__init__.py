"""
Aztec MCP server package.

This package exposes the Aztec node and PXE, plus the ``aztec`` and
``aztec-wallet`` command lines, as LLM-friendly MCP tools. See DESIGN.md for
full details.
"""

__all__ = ["catalog", "config", "formatting", "mcp", "resources"]
