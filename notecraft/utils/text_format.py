# notecraft/utils/text_format.py
import re

from notecraft.config import DEFAULT_COLORS

_TAG_PATTERN = re.compile(r"\[\[.*?\]\]")


def remove_format_codes(text: str) -> str:
    """Strips the inline [[COLOR]] ... [[/]] codes, e.g. for a plain terminal."""
    if not text:
        return ""
    return _TAG_PATTERN.sub(lambda m: "" if m.group(0) in DEFAULT_COLORS else m.group(0), text)
