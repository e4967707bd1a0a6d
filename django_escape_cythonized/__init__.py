from .html import escape, escape_text, soft_str
from .safestring import make_safe

__all__ = ["escape", "escape_text", "make_safe", "soft_str"]
