"""Default prompt template for answer synthesis"""

from typing import Sequence


DEFAULT_SYSTEM_PROMPT = """Eres un asistente especializado en TuristAgent, una aplicación móvil para turistas en México.
Responde SOLO con información del contexto proporcionado.
Si no sabes algo, di "No tengo esa información en mi base de conocimientos".
Sé conciso, preciso y amigable."""


def format_context(snippets: Sequence[str]) -> str:
    """Number the retrieved snippets, best match first"""
    return "\n\n".join(
        f"[Fuente {i}] {snippet}" for i, snippet in enumerate(snippets, 1)
    )


def build_prompt(system_prompt: str, question: str, context: Sequence[str]) -> str:
    """Assemble the single user message sent to the chat model
    
    Args:
        system_prompt: Instruction placed at the top of the prompt
        question: The user's question
        context: Retrieved snippets in rank order
    """
    return f"""{system_prompt}

CONTEXTO:
{format_context(context)}

PREGUNTA: {question}

RESPUESTA:"""
