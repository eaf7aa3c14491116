"""Pure percent-decoding over raw bytes.

The decoder is a **total** function: every input decodes, and
malformed escapes pass through literally.

Rules
-----
* ``%`` followed by two hex digits (either case) becomes that byte.
* Any other ``%`` is emitted as-is and only the ``%`` is consumed; the
  bytes after it are re-examined as ordinary input.
* ``+`` is an ordinary character, never a space.
* Exactly one decoding pass: ``%2520`` decodes to ``%20``.
* Hex pairs map to bytes, never to code points, so multi-byte UTF-8
  sequences escaped byte by byte (``%C3%A9``) are rebuilt intact.
"""

from __future__ import annotations

import re

# Left-to-right, non-overlapping: an invalid escape leaves its ``%`` in
# place and the scan resumes at the following byte.
_ESCAPE_RE = re.compile(rb"%([0-9A-Fa-f]{2})")


def to_bytes(data: bytes | str) -> bytes:
    """Return *data* as bytes.

    Text is encoded with UTF-8 and ``surrogateescape``, which reverses
    how the interpreter decodes ``sys.argv`` on POSIX: undecodable argv
    bytes come back exactly as the OS passed them.
    """
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


def _replace(match: re.Match[bytes]) -> bytes:
    return bytes((int(match.group(1), 16),))


def decode(data: bytes | str) -> bytes:
    """Percent-decode a single encoded unit.

    Parameters
    ----------
    data:
        One command-line argument or one stdin line (without its line
        terminator).

    Returns
    -------
    bytes
        The decoded byte sequence.  Never raises on malformed input.
    """
    raw = to_bytes(data)
    if b"%" not in raw:
        return raw
    return _ESCAPE_RE.sub(_replace, raw)
