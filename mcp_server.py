# mcp_server.py
import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from app.core.config import settings
from app.core.files import save_script_file
from app.core.logging import setup_logging
from app.services.errors import RemoteGenerationError, ShortRequestError
from app.services.script import THEME_OPTIONS
from app.services.short_generator import build_short_service

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize the MCP Server
mcp = FastMCP("KidsShortsGenerator")
short_service = build_short_service(settings)


@mcp.tool()
def generate_short_script(
    topic: str,
    duration: int = 30,
    save_to_disk: bool = False,
    output_dir: Optional[str] = None,
) -> str:
    """
    Writes a YouTube Shorts script for kids (ages 3-8) about a topic.

    Args:
        topic: A theme id such as "animals" or "space", or any free-text topic
            (e.g. "butterflies").
        duration: Target length of the short in seconds.
        save_to_disk: Also write the script as a .json file.
        output_dir: Where to write the file. Defaults to EXPORT_ROOT.

    Returns:
        The script as JSON (title, description, scenes, totalDuration), followed
        by the saved file path when save_to_disk is set. On failure, a single
        line starting with [ERROR].

    Example Usage (from LLM perspective):
        generate_short_script(topic="dinosaurs", duration=45)
    """
    try:
        content = short_service.generate(topic, duration)
    except ShortRequestError as e:
        return f"[ERROR] {e}"
    except RemoteGenerationError as e:
        logger.error("Remote generation failed for %r: %s", topic, e)
        return "[ERROR] Failed to generate content"

    script_json = content.model_dump_json(by_alias=True, indent=2)
    if not save_to_disk:
        return script_json

    try:
        path = save_script_file(content, output_dir)
    except (OSError, ValueError) as e:
        logger.error("Could not save script for %r: %s", topic, e)
        return f"[ERROR] Could not save script: {e}"
    return f"{script_json}\n\n[SAVED] {path}"


@mcp.tool()
def list_themes() -> str:
    """
    Lists the themes offered in the picker. Themes with has_template=true have
    hand-written scripts when no AI model is configured.
    """
    return json.dumps([option.model_dump() for option in THEME_OPTIONS], indent=2)


if __name__ == "__main__":
    mcp.run()
