import logging

import google.generativeai as genai

from droppit.config import get_settings

logger = logging.getLogger(__name__)

_configured_key: str | None = None


class LLMNotConfiguredError(RuntimeError):
    pass


def _configure_genai() -> None:
    global _configured_key

    settings = get_settings()
    if not settings.google_api_key:
        raise LLMNotConfiguredError("GOOGLE_API_KEY is not set")
    if _configured_key == settings.google_api_key:
        return

    genai.configure(api_key=settings.google_api_key)
    _configured_key = settings.google_api_key


async def generate_content(
    prompt: str,
    model_name: str | None = None,
    temperature: float | None = None,
    system_instruction: str | None = None,
) -> str:
    """
    Generates content using Google Gemini.

    Args:
        prompt: The user prompt or input text.
        model_name: Model to use. Defaults to the configured sizing model.
        temperature: Sampling temperature; None keeps the model default.
        system_instruction: Optional system instruction (persona).

    Returns:
        The generated text response.

    Raises:
        LLMNotConfiguredError: If no API key is configured.
        Exception: Whatever the Gemini client raises; callers decide the fallback.
    """
    _configure_genai()

    generation_config = {"temperature": temperature} if temperature is not None else None
    model = genai.GenerativeModel(
        model_name=model_name or get_settings().sizing_model_name,
        system_instruction=system_instruction,
        generation_config=generation_config,
    )
    response = await model.generate_content_async(prompt)
    return response.text
