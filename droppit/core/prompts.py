from functools import lru_cache
from pathlib import Path

# droppit/core/prompts.py -> droppit/core/ -> droppit/ -> prompts/
PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"


def get_prompts_dir() -> Path:
    """Returns the absolute path to the prompts directory."""
    return PROMPTS_DIR


def get_prompt_content(filename: str) -> str:
    """
    Reads and returns the content of a prompt file.

    Args:
        filename: The name of the file (e.g., 'sizing.md')

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    file_path = PROMPTS_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Prompt file not found: {file_path}")

    return file_path.read_text(encoding="utf-8")


@lru_cache
def get_sizing_prompt() -> str:
    """Returns the template in sizing.md ({description} placeholder)."""
    return get_prompt_content("sizing.md")


def render_sizing_prompt(item_description: str) -> str:
    return get_sizing_prompt().strip().replace("{description}", item_description)
