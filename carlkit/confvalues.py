"""Reading values out of configuration files and tracking unsaved changes."""

from __future__ import annotations

from typing import Callable, Optional

CONFIG_PREFIX = "CONFIG_"
DEFAULT_CONFIG_NAME = "include/generated/defconfig"


class ChangeCounter:
    """Counts unsaved changes and reports when the changed state flips."""

    def __init__(self, callback: Optional[Callable[[], None]] = None) -> None:
        self.count = 0
        self.callback = callback

    def set(self, count: int) -> None:
        """Set the count, calling the callback if changed-ness flips."""
        old = self.count
        self.count = count
        if self.callback is not None and bool(old) != bool(count):
            self.callback()

    def add(self, count: int) -> None:
        """Add to the count."""
        self.set(self.count + count)

    def changed(self) -> bool:
        """Tell whether there are unsaved changes."""
        return bool(self.count)


def _is_name_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "_"


def expand_value(text: str, lookup: Callable[[str], str]) -> str:
    """Replace each ``$NAME`` in ``text`` with ``lookup(NAME)``.

    A name is the run of letters, digits and underscores after the ``$``.
    """
    parts = []
    rest = text
    while (dollar := rest.find("$")) >= 0:
        parts.append(rest[:dollar])
        end = dollar + 1
        while end < len(rest) and _is_name_char(rest[end]):
            end += 1
        parts.append(lookup(rest[dollar + 1:end]))
        rest = rest[end:]
    parts.append(rest)
    return "".join(parts)


def parse_config_line(
    line: str, prefix: str = CONFIG_PREFIX
) -> Optional[tuple[str, Optional[str]]]:
    """Parse one line of a configuration file.

    Returns ``None`` for lines that carry no setting, ``(name, None)`` for a
    ``# PREFIXNAME is not set`` line and ``(name, raw_value)`` for an
    assignment. Raises ``ValueError`` for a line that is none of these.
    """
    if line.startswith("#"):
        if not line[2:].startswith(prefix):
            return None
        start = 2 + len(prefix)
        space = line.find(" ", start)
        if space < 0:
            return None
        if not line[space + 1:].startswith("is not set"):
            return None
        return line[start:space], None
    if line.startswith(prefix):
        eq = line.find("=", len(prefix))
        if eq < 0:
            return None
        value = line[eq + 1:]
        newline = value.find("\n")
        if newline >= 0:
            value = value[:newline]
            if value.endswith("\r"):
                value = value[:-1]
        return line[len(prefix):eq], value
    if line == "" or line[0] in "\r\n":
        return None
    raise ValueError(f"unexpected data: {line!r}")


def unescape_string_value(text: str) -> str:
    """Return the contents of a double-quoted, backslash-escaped value.

    Anything after the closing quote is ignored. Raises ``ValueError`` if the
    value does not start with a quote or is not terminated.
    """
    if not text.startswith('"'):
        raise ValueError(f"string value must start with a quote: {text!r}")
    body = text[1:]
    parts = []
    i = 0
    while True:
        quote = body.find('"', i)
        backslash = body.find("\\", i)
        if quote < 0 and backslash < 0:
            raise ValueError(f"invalid string found: {text!r}")
        if quote >= 0 and (backslash < 0 or quote < backslash):
            parts.append(body[i:quote])
            return "".join(parts)
        parts.append(body[i:backslash])
        if backslash + 1 >= len(body):
            raise ValueError(f"invalid string found: {text!r}")
        parts.append(body[backslash + 1])
        i = backslash + 2