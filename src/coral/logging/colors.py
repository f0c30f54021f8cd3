"""
Module: colors.py
Location: src/coral/logging/

ANSI text styling for console output, built on colorama.
Each function wraps a string in one foreground or background colour
and resets it afterwards.
"""

import colorama
from colorama import Back, Fore
from colorama.ansitowin32 import AnsiToWin32

# Legacy Windows consoles need escape-code translation; no-op elsewhere.
colorama.just_fix_windows_console()

_enabled = True


def set_color_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


def is_color_enabled() -> bool:
    return _enabled


def strip_style(text: str) -> str:
    return AnsiToWin32.ANSI_CSI_RE.sub("", text)


def _wrap(code: str, reset: str, text: str) -> str:
    if not _enabled:
        return text
    return f"{code}{text}{reset}"


def cyan(text: str) -> str:
    return _wrap(Fore.CYAN, Fore.RESET, text)


def white(text: str) -> str:
    return _wrap(Fore.WHITE, Fore.RESET, text)


def yellow(text: str) -> str:
    return _wrap(Fore.YELLOW, Fore.RESET, text)


def red(text: str) -> str:
    return _wrap(Fore.RED, Fore.RESET, text)


def bg_cyan(text: str) -> str:
    return _wrap(Back.CYAN, Back.RESET, text)


def bg_white(text: str) -> str:
    return _wrap(Back.WHITE, Back.RESET, text)


def bg_yellow(text: str) -> str:
    return _wrap(Back.YELLOW, Back.RESET, text)


def bg_red(text: str) -> str:
    return _wrap(Back.RED, Back.RESET, text)
