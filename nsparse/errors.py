from typing import Optional

class NamespaceError(Exception):
    """Base class for errors raised by nsparse."""

class MalformedHeaderError(NamespaceError):
    MISSING_OPEN_BRACKET = "missing_open_bracket"
    MISSING_CLOSE_BRACKET = "missing_close_bracket"
    BRACKETS_OUT_OF_ORDER = "brackets_out_of_order"

    _MESSAGES = {
        MISSING_OPEN_BRACKET: 'expecting exactly 1 "["',
        MISSING_CLOSE_BRACKET: 'expecting exactly 1 "]"',
        BRACKETS_OUT_OF_ORDER: '"[" must be before "]"',
    }

    def __init__(self, kind: str, line: str, lineno: Optional[int] = None):
        self.kind = kind
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}{self._MESSAGES.get(kind, kind)}, got {line!r}")

class ClauseError(NamespaceError):
    """Reserved for clause lines that cannot be parsed; trimming never fails today."""

class ConfigError(NamespaceError):
    pass
