"""
Safe string marker used by the escaping engine.

Resolves the safe-string class once (Django's SafeString unless the
ESCAPE_SAFE_STRING_CLASS setting points elsewhere) and provides make_safe()
for wrapping already-escaped text. Re-exports Django's SafeData/SafeString
types for isinstance compatibility.
"""

import cython
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string
from django.utils.safestring import SafeData, SafeString

__all__ = [
    "SafeData",
    "SafeString",
    "get_safe_string_class",
    "make_safe",
    "reset_safe_string_class",
]

logger = logging.getLogger(__name__)

DEFAULT_SAFE_STRING_CLASS = "django.utils.safestring.SafeString"

# Resolved safe-string class: None = not yet resolved.
_safe_string_class: object = None


@cython.cfunc
def _safe_string_class_path():
    try:
        return getattr(settings, "ESCAPE_SAFE_STRING_CLASS", DEFAULT_SAFE_STRING_CLASS)
    except ImproperlyConfigured:
        # DJANGO_SETTINGS_MODULE unset and settings.configure() not called.
        return DEFAULT_SAFE_STRING_CLASS


@cython.ccall
def get_safe_string_class():
    """
    Return the class used to mark escaped text as safe.

    Resolved on first use and cached for the life of the process. Raises
    ImproperlyConfigured if the configured class cannot be imported or does
    not implement __html__; nothing is cached in that case, so every escaping
    call keeps failing instead of returning unmarked text.
    """
    global _safe_string_class
    if _safe_string_class is not None:
        return _safe_string_class

    path = _safe_string_class_path()
    if not isinstance(path, str):
        raise ImproperlyConfigured(
            f"ESCAPE_SAFE_STRING_CLASS must be a dotted path string, got {path!r}."
        )
    try:
        cls = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"ESCAPE_SAFE_STRING_CLASS {path!r} could not be imported: {exc}"
        ) from exc
    if not hasattr(cls, "__html__"):
        raise ImproperlyConfigured(
            f"ESCAPE_SAFE_STRING_CLASS {path!r} does not implement __html__."
        )

    logger.debug("Resolved safe string class %s", path)
    _safe_string_class = cls
    return cls


def reset_safe_string_class():
    """Forget the resolved class so the next escaping call resolves it again."""
    global _safe_string_class
    _safe_string_class = None


@receiver(setting_changed)
def _safe_string_class_changed(*, setting, **kwargs):
    if setting == "ESCAPE_SAFE_STRING_CLASS":
        reset_safe_string_class()


@cython.ccall
def make_safe(s):
    """Mark a value as safe for HTML output."""
    if hasattr(s, "__html__"):
        return s
    return get_safe_string_class()(s)
