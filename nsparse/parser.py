"""
Group clause lines into namespaces declared by bracketed headers.

    namespace_header := "[" token "]"
    token            := segment (delimiter segment)*
    segment          := any run of characters excluding delimiter

For example:

    key1=value1        -> global
    [push/pull]
    k2=v2              -> push, pull
    []
    k3=v3              -> global

Clauses before any header, or under a header whose segments are all empty,
land in the "global" namespace.
"""
import io
import sys
from typing import Dict, Iterable, List, Optional, TextIO

from .errors import MalformedHeaderError
from .reader import read_lines

Namespace = Dict[str, List[str]]  # namespace key -> clauses in input order

DEFAULT_DELIMITER = "/"
GLOBAL_NAMESPACE_KEY = "global"

L_BRACE = "["
R_BRACE = "]"

NAMESPACE = "namespace"
CLAUSE = "clause"

def _dbg(enabled: bool, msg: str) -> None:
    if enabled:
        print(f"[parse] {msg}", file=sys.stderr)

def _check_delimiter(delimiter: Optional[str]) -> str:
    if delimiter is None:
        return DEFAULT_DELIMITER
    if not isinstance(delimiter, str) or delimiter == "":
        raise ValueError(f"delimiter must be a non-empty string, got {delimiter!r}")
    return delimiter

def classify(line: str) -> str:
    if line.strip().startswith(L_BRACE):
        return NAMESPACE
    return CLAUSE

def parse_clause(line: str) -> str:
    return line.strip()

def prepare_namespace_keys(segments: List[str]) -> List[str]:
    """
    Trim segments and drop the empty ones, keeping order and duplicates.
    A header that had segments but none survive (e.g. "[ ]" or "[///]")
    resolves to the global namespace.
    """
    cleaned = [s.strip() for s in segments if s.strip()]
    if segments and not cleaned:
        return [GLOBAL_NAMESPACE_KEY]
    return cleaned

def parse_namespace_header(line: str, delimiter: str = DEFAULT_DELIMITER,
                           lineno: Optional[int] = None) -> List[str]:
    """
    Return the namespace keys declared by a header line such as "[push/pull]".
    Raises MalformedHeaderError unless the line holds exactly one "[" followed
    by exactly one "]".
    """
    delimiter = _check_delimiter(delimiter)
    line = line.strip()
    if line.count(L_BRACE) != 1:
        raise MalformedHeaderError(MalformedHeaderError.MISSING_OPEN_BRACKET, line, lineno)
    if line.count(R_BRACE) != 1:
        raise MalformedHeaderError(MalformedHeaderError.MISSING_CLOSE_BRACKET, line, lineno)
    lbi, rbi = line.index(L_BRACE), line.index(R_BRACE)
    if lbi >= rbi:
        raise MalformedHeaderError(MalformedHeaderError.BRACKETS_OUT_OF_ORDER, line, lineno)
    name = line[lbi + 1:rbi]
    return prepare_namespace_keys(name.split(delimiter))

def parse_lines(lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER,
                verbose: bool = False) -> Namespace:
    """
    Fold a sequence of lines into a Namespace in a single pass.

    Each header replaces the set of keys that following clauses are appended
    to; a clause is appended once per key in that set. The first malformed
    header aborts the parse and nothing is returned.
    """
    delimiter = _check_delimiter(delimiter)
    ns: Namespace = {}
    targets: List[str] = [GLOBAL_NAMESPACE_KEY]
    lineno = 0
    for line in lines:
        lineno += 1
        if classify(line) == NAMESPACE:
            targets = parse_namespace_header(line, delimiter, lineno=lineno)
            _dbg(verbose, f"line {lineno}: targets={targets}")
            continue
        clause = parse_clause(line)
        if not clause:
            continue
        for key in targets:
            ns.setdefault(key or GLOBAL_NAMESPACE_KEY, []).append(clause)
    _dbg(verbose, f"parsed {lineno} lines into {len(ns)} namespaces")
    return ns

def parse_with_delimiter(source: TextIO, delimiter: str, verbose: bool = False) -> Namespace:
    return parse_lines(read_lines(source), delimiter, verbose=verbose)

def parse(source: TextIO, verbose: bool = False) -> Namespace:
    return parse_with_delimiter(source, DEFAULT_DELIMITER, verbose=verbose)

def parse_text(text: str, delimiter: str = DEFAULT_DELIMITER, verbose: bool = False) -> Namespace:
    # same line breaks as a stream: only \n, \r\n and \r
    return parse_lines(read_lines(io.StringIO(text or "", newline="")), delimiter, verbose=verbose)
