import logging

from droppit.config import get_settings
from droppit.core.llm import generate_content
from droppit.core.prompts import render_sizing_prompt

logger = logging.getLogger(__name__)

SIZING_FALLBACK_MESSAGE = "Unable to determine size automatically. Please check our manual dimensions."


async def suggest_package_size(item_description: str) -> str:
    """Ask Gemini which package tier fits the items; one shot, no retries."""
    settings = get_settings()
    try:
        text = await generate_content(
            prompt=render_sizing_prompt(item_description),
            model_name=settings.sizing_model_name,
            temperature=settings.sizing_temperature,
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("Sizing assistant error", exc_info=exc)
        return SIZING_FALLBACK_MESSAGE

    if not text:
        return SIZING_FALLBACK_MESSAGE
    return text
