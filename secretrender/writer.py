"""Output file writer"""
import os
import shutil
import tempfile
from typing import Iterable

from secretrender import logger
from secretrender.exceptions import OutputError


def _stream(f, chunks: Iterable[str]):
    """Writes ``chunks`` to ``f`` and closes it.

    I/O errors (including the ones only raised when the buffer is flushed
    on close) become :class:`OutputError`. Render errors raised by
    ``chunks`` propagate untouched.
    """
    try:
        with f:
            for chunk in chunks:
                f.write(chunk)
    except (OSError, UnicodeEncodeError) as exc:
        raise OutputError("Failed to write output file: %s" % exc) from exc


def write_in_place(path: str, chunks: Iterable[str]):
    """Truncates ``path`` and streams ``chunks`` into it.

    A failure half-way leaves a partial file behind.
    """
    try:
        f = open(path, 'w', encoding='utf-8')
    except OSError as exc:
        raise OutputError("Failed to create output file: %s" % exc) from exc

    _stream(f, chunks)


def write_atomic(path: str, chunks: Iterable[str]):
    """Streams ``chunks`` into a temp file next to ``path`` then renames it.

    ``path`` is only replaced once everything was written. Symlinks are
    followed, the file they point to is the one replaced. An existing
    file keeps its permission bits, a new one is created 0600.
    """
    target = os.path.realpath(path)
    directory, name = os.path.split(target)
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.%s.' % name, suffix='.tmp',
                                        dir=directory)
    except OSError as exc:
        raise OutputError("Failed to create output file: %s" % exc) from exc

    try:
        try:
            f = open(fd, 'w', encoding='utf-8')
        except OSError as exc:
            os.close(fd)
            raise OutputError(
                "Failed to create output file: %s" % exc) from exc

        _stream(f, chunks)

        try:
            if os.path.exists(target):
                shutil.copymode(target, tmp_path)
            os.replace(tmp_path, target)
        except OSError as exc:
            raise OutputError(
                "Failed to create output file: %s" % exc) from exc
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.debug('Could not remove %s' % tmp_path, exc_info=True)
        raise


def write_output(path: str, chunks: Iterable[str], atomic: bool = True):
    """Writes rendered ``chunks`` to ``path``."""
    if atomic:
        write_atomic(path, chunks)
    else:
        write_in_place(path, chunks)
    logger.debug('Wrote %s' % path)
