"""apinodes: dual-mode HTTP API units for workflow hosts and AI agents."""

__version__ = "0.1.0"
