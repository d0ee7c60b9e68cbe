"""Azure Ops - subscription resource reporting toolkit."""

__version__ = "1.0.0"
