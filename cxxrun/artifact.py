import os
import tempfile

import cxxrun.logs

from cxxrun import env, errors


def acquire(source_name, directory = None):
    directory = (directory if directory is not None else env.temporary_directory())
    try:
        fd, path = tempfile.mkstemp(prefix = env.ARTIFACT_PREFIX, dir = directory)
    except OSError as e:
        raise errors.Resource_error.from_os_error(e, source_name, 'mkstemp')
    os.close(fd)
    cxxrun.logs.verbose('acquired temporary executable {}'.format(path),
        path = source_name)
    return path

def release(path):
    try:
        os.unlink(path)
    except FileNotFoundError:
        # Compilers remove their output when they fail.
        cxxrun.logs.verbose('temporary executable already gone', path = path)
        return False
    except OSError as e:
        cxxrun.logs.warn('could not remove temporary executable: {}'.format(
            os.strerror(e.errno) if e.errno else e), path = path)
        return False
    cxxrun.logs.verbose('removed temporary executable', path = path)
    return True


class Artifact:
    def __init__(self, source_name, directory = None):
        self.source_name = source_name
        self.directory = directory
        self.path = None

    def __enter__(self):
        self.path = acquire(self.source_name, self.directory)
        return self

    def __exit__(self, *exc_info):
        if self.path is not None:
            release(self.path)
            self.path = None
        return False
