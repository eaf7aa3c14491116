"""Infrastructure: staging decoded stdin for the target process.

The decoded stream is written in full to an anonymous temporary file
before the target starts, so the target never races the decoder.

Rules
-----
* One spool per invocation, created fresh and scoped by ``with``.
* The handle is closed on every exit path out of the ``with`` block.
* On POSIX the file is unlinked at creation, so it leaves nothing
  behind even when the process is killed.
"""

from __future__ import annotations

import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import BinaryIO


@contextmanager
def spool_chunks(chunks: Iterable[bytes]) -> Iterator[BinaryIO]:
    """Materialise *chunks* into a temporary file and yield it rewound.

    The yielded handle is positioned at offset 0 and backed by a real
    file descriptor, suitable for ``os.dup2`` or ``subprocess.Popen``.
    """
    with tempfile.TemporaryFile(prefix="urlargs-") as handle:
        for chunk in chunks:
            handle.write(chunk)
        handle.flush()
        handle.seek(0)
        yield handle
