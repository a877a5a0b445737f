"""Kernel: request resolution, batch execution and tool execution."""
