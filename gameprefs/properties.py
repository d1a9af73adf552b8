"""Reading and writing of flat ``key=value`` properties files.

The format follows java.util.Properties so files written by older clients
load unchanged: ``#`` and ``!`` start comment lines, keys end at the first
unescaped ``=``, ``:`` or whitespace, a trailing backslash continues the
line and ``\\uXXXX`` escapes carry anything outside printable ASCII.
"""

import os
import logging
import re
import tempfile
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

# Properties files are ISO-8859-1; everything we write is escaped to ASCII
ENCODING = "latin-1"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SPECIALS = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}

Items = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _continues(line: str) -> bool:
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    pending = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            pending = line
        else:
            pending = pending[:-1] + line
        if _continues(pending):
            continue
        yield pending
        pending = None
    if pending is not None:
        yield pending[:-1]


def _split_pair(line: str) -> Tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in "=:":
            return line[:i], line[i + 1:].lstrip(_WHITESPACE)
        if c in _WHITESPACE:
            rest = line[i:].lstrip(_WHITESPACE)
            if rest[:1] in ("=", ":"):
                rest = rest[1:].lstrip(_WHITESPACE)
            return line[:i], rest
        i += 1
    return line, ""


def unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        c = text[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= len(text):
            break
        c = text[i]
        i += 1
        if c == "u":
            code = text[i:i + 4]
            if len(code) != 4 or not all(h in "0123456789abcdefABCDEF" for h in code):
                raise ValueError(f"Malformed \\uxxxx encoding: {text!r}")
            out.append(chr(int(code, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(c, c))
    result = "".join(out)
    # \u escapes of astral characters arrive as surrogate pairs
    return result.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def escape(text: str, is_key: bool = False) -> str:
    out = []
    for i, c in enumerate(text):
        if c == " ":
            out.append("\\ " if is_key or i == 0 else " ")
        elif c in _SPECIALS:
            out.append(_SPECIALS[c])
        elif c in "=:#!\\":
            out.append("\\" + c)
        elif ord(c) < 0x20 or ord(c) > 0x7E:
            units = c.encode("utf-16-be", "surrogatepass")
            for j in range(0, len(units), 2):
                out.append("\\u%04X" % int.from_bytes(units[j:j + 2], "big"))
        else:
            out.append(c)
    return "".join(out)


def loads(text: str) -> Dict[str, str]:
    """Parse properties text. Later duplicates win."""
    props = {}
    for line in _logical_lines(text):
        key, value = _split_pair(line)
        props[unescape(key)] = unescape(value)
    return props


def dumps(items: Items, comment: Optional[str] = None) -> str:
    """Serialize pairs in the given order, with an optional header comment."""
    pairs = items.items() if isinstance(items, Mapping) else items
    lines = []
    if comment:
        lines.append("#" + _LINE_BREAK.sub("\n#", comment))
    lines.append("#" + datetime.now().strftime("%a %b %d %H:%M:%S %Y"))
    for key, value in pairs:
        lines.append(f"{escape(key, is_key=True)}={escape(value)}")
    return "\n".join(lines) + "\n"


def load_file(path: str) -> Dict[str, str]:
    with open(path, "r", encoding=ENCODING, newline="") as f:
        return loads(f.read())


def _target_mode(path: str) -> int:
    """Permission bits for ``path``: kept if it exists, else 0o666 minus the umask."""
    try:
        return os.stat(path).st_mode & 0o777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: str, text: str, encoding: str = ENCODING) -> None:
    """Replace ``path`` with ``text`` via a temp file in the same folder.

    Errors propagate; the original file is left untouched when writing fails.
    """
    dir_path = os.path.dirname(path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp", dir=dir_path or None)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates the file owner-only
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
        tmp_path = None
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)


def save_file(path: str, items: Items, comment: Optional[str] = None) -> None:
    write_text_atomic(path, dumps(items, comment))


# Typed accessors. A missing or malformed value yields ``default``.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_logger = logging.getLogger("gameprefs.properties")


def prop_str(props: Mapping[str, str], key: str, default: str) -> str:
    value = props.get(key)
    return default if value is None else value


def prop_bool(props: Mapping[str, str], key: str, default: bool) -> bool:
    value = props.get(key)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    _logger.debug(f"Malformed boolean for {key}: {value!r}, using {default}")
    return default


def prop_int(props: Mapping[str, str], key: str, default: int) -> int:
    value = props.get(key)
    if value is None:
        return default
    if _INT_RE.fullmatch(value.strip()):
        return int(value.strip())
    _logger.debug(f"Malformed integer for {key}: {value!r}, using {default}")
    return default


def prop_list(props: Mapping[str, str], key: str, default: Sequence[str]) -> List[str]:
    value = props.get(key)
    if value is None:
        return list(default)
    return split_list(value)


def split_list(value: str) -> List[str]:
    """Split a comma-joined list; trailing empty items are dropped."""
    items = value.split(",")
    while items and items[-1] == "":
        items.pop()
    return items


def join_list(items: Iterable[str]) -> str:
    # Items containing a comma do not survive a round trip
    return ",".join(items)
