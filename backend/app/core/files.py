import os
import re
from typing import Optional

from app.core.config import settings
from app.schemas.short import ShortContent

_UNSAFE = re.compile(r"[\s/\\]+")
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")

# Keeps the whole name well under the common 255-byte filename limit
MAX_TITLE_BYTES = 200


def export_filename(title: str) -> str:
    """
    youtube-short-<title>.json, with whitespace runs and path separators in
    the title replaced by '-', control characters removed, and the title cut
    to MAX_TITLE_BYTES of UTF-8 on a character boundary.
    """
    slug = _UNSAFE.sub("-", _CONTROL.sub("", title))
    slug = slug.encode("utf-8")[:MAX_TITLE_BYTES].decode("utf-8", errors="ignore")
    return f"youtube-short-{slug}.json"


def serialize_for_download(content: ShortContent) -> bytes:
    return content.model_dump_json(by_alias=True, indent=2).encode("utf-8")


def ensure_export_dir(directory: Optional[str] = None) -> str:
    directory = directory or settings.EXPORT_ROOT
    os.makedirs(directory, exist_ok=True)
    return directory


def save_script_file(content: ShortContent, directory: Optional[str] = None) -> str:
    """Write the script as JSON into the export directory and return its path."""
    directory = ensure_export_dir(directory)
    path = os.path.join(directory, export_filename(content.title))

    with open(path, "wb") as f:
        f.write(serialize_for_download(content))

    return path
