from __future__ import annotations

from typing import Any, Optional

from langchain.agents import create_agent

from .config import load_config
from .logger import log_message
from .tools import TOOLS

SYSTEM_PROMPT = (
    "You are Tutor. Your job is explaining basic programming mechanics using the lessons you can run. "
    "Run the relevant lesson before explaining it and quote its output exactly. "
    "When asked for the largest number in a list, use the find_max tool; an empty list has no maximum, "
    "say so instead of inventing a value."
)


def build_agent(model: Optional[str] = None) -> Any:
    """Create the tutor agent; ``model`` defaults to the configured tutor model."""
    if model is None:
        model = load_config().tutor.model
    log_message(f"Building tutor agent with model {model}")
    return create_agent(
        model=model,
        tools=TOOLS,
        system_prompt=SYSTEM_PROMPT,
    )
