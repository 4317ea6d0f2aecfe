import contextlib
import io
import pathlib
import sys
from typing import Iterator, Optional, TextIO

def read_lines(stream: TextIO) -> Iterator[str]:
    """
    Lazily yield lines from a text stream with the terminator stripped.
    Handles "\\n", "\\r\\n" and a bare "\\r".
    """
    for raw in stream:
        if raw.endswith("\r\n"):
            yield raw[:-2]
        elif raw.endswith(("\n", "\r")):
            yield raw[:-1]
        else:
            yield raw

@contextlib.contextmanager
def open_source(path: Optional[str], encoding: str = "utf-8") -> Iterator[TextIO]:
    # "-" or no path means stdin, decoded with `encoding` and left open for the caller
    if path is None or path == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # already a text stream without bytes underneath (e.g. io.StringIO)
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding=encoding, newline="")
        try:
            yield wrapper
        finally:
            wrapper.detach()
        return
    with open(path, "r", encoding=encoding, newline="") as f:
        yield f

def iter_file_lines(path: str, encoding: str = "utf-8") -> Iterator[str]:
    with pathlib.Path(path).open("r", encoding=encoding, newline="") as f:
        yield from read_lines(f)
