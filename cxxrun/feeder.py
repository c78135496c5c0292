import os

from cxxrun import errors


CHUNK_SIZE = 4096

# Any of these ends the directive line.
DIRECTIVE_TERMINATORS = (b'\0', b'\n', b'\r',)


def open_source(path):
    try:
        return open(path, 'rb')
    except OSError as e:
        raise errors.Source_open_error.from_os_error(e, path, 'open')

def skip_directive_line(stream, path = None):
    """Discard bytes up to and including the first NUL, LF or CR.

    Stops quietly at end of file. Returns the number of bytes discarded.
    """
    skipped = 0
    while True:
        try:
            c = stream.read(1)
        except OSError as e:
            raise errors.Resource_error.from_os_error(e, path, 'read')
        if not c:
            break
        skipped += 1
        if c in DIRECTIVE_TERMINATORS:
            break
    return skipped

def write_all(fd, chunk, path = None):
    view = memoryview(chunk)
    while view:
        try:
            written = os.write(fd, view)
        except OSError as e:
            raise errors.Resource_error.from_os_error(e, path, 'write')
        view = view[written:]

def feed(stream, fd, chunk_size = CHUNK_SIZE, path = None):
    forwarded = 0
    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            raise errors.Resource_error.from_os_error(e, path, 'read')
        if not chunk:
            break
        write_all(fd, chunk, path)
        forwarded += len(chunk)
    return forwarded
