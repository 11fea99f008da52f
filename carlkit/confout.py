"""Formatting of symbols and comments for the files a configuration is written to.

Each formatter returns the text for one symbol or comment; an empty string
means nothing is written for it.
"""

from __future__ import annotations

import os

from .confvalues import CONFIG_PREFIX
from .expr import Symbol, SymbolType

_HEADING_LIMIT = 255
_DEFAULT_CONFIG = ".config"
_BOOLISH = (SymbolType.BOOLEAN, SymbolType.TRISTATE)


def _hex_prefix(value: str) -> str:
    return "" if value.startswith(("0x", "0X")) else "0x"


def format_config_symbol(
    sym: Symbol, value: str, skip_unset: bool = False, prefix: str = CONFIG_PREFIX
) -> str:
    """Format a symbol as a ``.config`` line."""
    if sym.type in _BOOLISH and value.startswith("n"):
        return "" if skip_unset else f"# {prefix}{sym.name} is not set\n"
    return f"{prefix}{sym.name}={value}\n"


def format_cmake_symbol(
    sym: Symbol, value: str, skip_unset: bool = False, prefix: str = CONFIG_PREFIX
) -> str:
    """Format a symbol as a CMake ``set()`` command.

    Raises ``ValueError`` for a module value, which CMake output cannot hold.
    """
    name = f"{prefix}{sym.name}"
    if sym.type in _BOOLISH:
        if value.startswith("n"):
            return "" if skip_unset else f"set({name} false)\n"
        if value.startswith("m"):
            raise ValueError(f"symbol {sym.name} set to 'm' cannot be written for CMake")
        return f"set({name} true)\n"
    if sym.type == SymbolType.HEX:
        return f"set({name} {_hex_prefix(value)}{value})\n"
    if sym.type in (SymbolType.STRING, SymbolType.INT):
        return f"set({name} {value})\n"
    return ""


def format_header_symbol(sym: Symbol, value: str, prefix: str = CONFIG_PREFIX) -> str:
    """Format a symbol as a C preprocessor ``#define``."""
    name = f"{prefix}{sym.name}"
    if sym.type in _BOOLISH:
        if value.startswith("n"):
            return ""
        suffix = "_MODULE" if value.startswith("m") else ""
        return f"#define {name}{suffix} 1\n"
    if sym.type == SymbolType.HEX:
        return f"#define {name} {_hex_prefix(value)}{value}\n"
    if sym.type in (SymbolType.STRING, SymbolType.INT):
        return f"#define {name} {value}\n"
    return ""


def format_tristate_symbol(sym: Symbol, value: str, prefix: str = CONFIG_PREFIX) -> str:
    """Format a set tristate symbol with an upper-case value; others give nothing."""
    if sym.type == SymbolType.TRISTATE and value and value[0] != "n":
        return f"{prefix}{sym.name}={value[0].upper()}\n"
    return ""


def _comment_lines(text: str, lead: str) -> str:
    return "".join(
        f"{lead} {line}\n" if line else f"{lead}\n" for line in text.split("\n")
    )


def format_comment(text: str) -> str:
    """Format text as ``#`` comment lines, one per line of text."""
    return _comment_lines(text, "#")


def format_header_comment(text: str) -> str:
    """Format text as a C block comment."""
    return "/*\n" + _comment_lines(text, " *") + " */\n"


def heading_text(title: str) -> str:
    """Return the text of the comment at the top of every generated file."""
    text = f"\nAutomatically generated file; DO NOT EDIT.\n{title}\n"
    return text[:_HEADING_LIMIT]


def _default_config_name() -> str:
    return os.environ.get("KCONFIG_CONFIG") or _DEFAULT_CONFIG


def split_config_path(name: str | None) -> tuple[str, str]:
    """Split where a configuration is to be written into directory and file name.

    The directory keeps its trailing slash. A missing name, or one that names
    a directory, uses the configured default file name.
    """
    if not name:
        return "", _default_config_name()
    if os.path.isdir(name):
        return name + "/", _default_config_name()
    slash = name.rfind("/")
    if slash >= 0:
        base = name[slash + 1:]
        return name[:slash + 1], base or _default_config_name()
    return "", name