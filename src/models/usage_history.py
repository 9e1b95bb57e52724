"""Usage history record - an append-only event for a prompt invocation."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class UsageHistory:
    """Records that a prompt was used against a target (e.g. "chatgpt", "clipboard")."""

    id: str
    prompt_id: str
    timestamp: datetime
    target: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
