"""Load a custom system prompt from YAML"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml

from .templates import DEFAULT_SYSTEM_PROMPT


def load_system_prompt(path: Optional[Union[str, os.PathLike]] = None) -> str:
    """Read the system prompt from a YAML file with a `system_prompt` key
    
    Falls back to RAG_PROMPT_FILE, then to the built-in prompt when no
    file is configured or the file does not exist.
    
    Raises:
        ValueError: if the file exists but is not a mapping with a
            non-empty `system_prompt` string
    """
    if path is None:
        path = os.getenv("RAG_PROMPT_FILE")
    if not path:
        return DEFAULT_SYSTEM_PROMPT
    
    prompt_file = Path(os.path.expanduser(os.fspath(path)))
    if not prompt_file.exists():
        return DEFAULT_SYSTEM_PROMPT
    
    try:
        with open(prompt_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid prompt file {prompt_file}: {e}") from e
    
    if not isinstance(data, dict):
        raise ValueError(f"Prompt file {prompt_file} must contain a mapping")
    
    prompt = data.get('system_prompt')
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValueError(f"Prompt file {prompt_file} has no 'system_prompt' text")
    
    return prompt.strip()
