"""Prompt construction for answer synthesis"""

from .templates import DEFAULT_SYSTEM_PROMPT, build_prompt, format_context
from .loader import load_system_prompt

__all__ = ['DEFAULT_SYSTEM_PROMPT', 'build_prompt', 'format_context', 'load_system_prompt']
