"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Provides translation support for the CLI.
English (en) is the default language, with Korean (ko) as an option.

Architecture:
    - Messages are organized by namespace (common, finder)
    - Translation function t() supports format string interpolation
    - Worker threads do not inherit the context variable, so code running
      inside a region task passes ``lang`` explicitly (see Reporter.lang)

Usage:
    from cli.i18n import t, set_lang, get_lang

    # Basic translation
    print(t("common.interrupted"))  # "Interrupted" or "중단되었습니다"

    # With interpolation
    print(t("finder.searching_for", ip="10.0.1.100"))

    # Explicit language override
    print(t("finder.not_found", lang="ko", ip="10.0.1.100"))
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Any

# Supported languages
SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "en"

# Default language context (fallback when lang is not passed explicitly)
_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Set current language in context variable.

    Args:
        lang: Language code ("ko" or "en")
    """
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "finder.not_found")
        lang: Optional language override. If not provided, uses context variable.
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found

    Examples:
        >>> t("finder.account", lang="en", account_id="123456789012")
        "AWS Account: 123456789012"

        >>> t("finder.account", lang="ko", account_id="123456789012")
        "AWS 계정: 123456789012"
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()

    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    # Look up the message
    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        # Key not found, return key as-is
        return key

    # Get the translation for the specified language
    text = msg_dict.get(lang)
    if text is None:
        text = msg_dict.get(DEFAULT_LANG, key)

    # Apply format string interpolation if kwargs provided
    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)

    return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
