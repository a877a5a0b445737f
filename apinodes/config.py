"""Process-wide defaults for units and transports.

Values can be overridden through environment variables so that a host can
tune them without touching unit declarations.
"""

import os

DEFAULT_HTTP_TIMEOUT_SECONDS: float = float(os.getenv("APINODES_HTTP_TIMEOUT", "30"))
DEFAULT_USER_AGENT: str = os.getenv("APINODES_USER_AGENT", "apinodes/0.1.0")
DEFAULT_ACCEPT: str = "application/json"

# Methods that carry a JSON body; everything else sends arguments as query params
BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})

# Trace stream name used for agent tool calls
AI_TOOL_STREAM: str = "ai_tool"
