"""FootballBin MCP - AI match predictions over JSON-RPC and stdio."""

__version__ = "1.0.0"
