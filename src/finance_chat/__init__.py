"""Personal-finance chat assistant: streaming chat client and endpoint."""

__version__ = "0.1.0"
