"""Answer synthesis through an OpenAI-compatible chat completions API"""

import os
from typing import Optional, Sequence

from openai import OpenAI, APIConnectionError, APIStatusError

from ..errors import ApiError
from ..prompts import DEFAULT_SYSTEM_PROMPT, build_prompt


class ResponseSynthesizer:
    """Turn a question plus retrieved snippets into an answer"""
    
    NO_ANSWER = "No se pudo obtener respuesta"
    
    def __init__(self, api_key: Optional[str] = None,
                 model: Optional[str] = None,
                 base_url: Optional[str] = None,
                 temperature: float = 0.3,
                 max_tokens: int = 500,
                 timeout: Optional[float] = None,
                 max_retries: int = 0,
                 system_prompt: Optional[str] = None,
                 client: Optional[OpenAI] = None):
        """Initialize synthesizer
        
        Args:
            api_key: API key (default: OPENAI_API_KEY)
            model: Chat model (default: RAG_CHAT_MODEL or gpt-4o-mini)
            base_url: API base URL (default: OPENAI_BASE_URL or the OpenAI API)
            temperature: Sampling temperature
            max_tokens: Maximum tokens in the answer
            timeout: Request timeout in seconds (default: RAG_REQUEST_TIMEOUT or 30)
            max_retries: Retries on transient failures
            system_prompt: Instruction placed at the top of every prompt
            client: Preconfigured OpenAI client, used as-is
        """
        self.model = model or os.getenv("RAG_CHAT_MODEL", "gpt-4o-mini")
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        
        if client is None:
            api_key = api_key or os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError("Missing OPENAI_API_KEY")
            if timeout is None:
                timeout = float(os.getenv("RAG_REQUEST_TIMEOUT", "30"))
            client = OpenAI(
                api_key=api_key,
                base_url=base_url or os.getenv("OPENAI_BASE_URL") or None,
                timeout=timeout,
                max_retries=max_retries,
            )
        self.client = client
    
    def build_prompt(self, question: str, context: Sequence[str]) -> str:
        return build_prompt(self.system_prompt, question, context)
    
    def answer(self, question: str, context: Sequence[str]) -> str:
        """Ask the chat model to answer from the given context
        
        Args:
            question: The user's question
            context: Retrieved snippets, best first
            
        Returns:
            Text of the first completion
            
        Raises:
            ApiError: on network failure or a non-success status
        """
        prompt = self.build_prompt(question, context)
        
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as e:
            raise ApiError(f"HTTP {e.status_code}: {e.response.text}", status_code=e.status_code) from e
        except APIConnectionError as e:
            raise ApiError(f"Request failed: {e}") from e
        
        if not completion.choices:
            return self.NO_ANSWER
        
        return completion.choices[0].message.content or self.NO_ANSWER
