import os


################################################################################
# Base class for every failure the launcher knows how to report.
#
class Error(Exception):
    def __init__(self):
        super().__init__()
        self._notes = []

    def what(self):
        return ' '.join(type(self).__name__.lower().split('_'))

    def exit_code(self):
        return 1

    def notes(self):
        return self._notes

    def note(self, s):
        self._notes.append(s)
        return self

    def __str__(self):
        return self.what()


################################################################################
# Invalid invocation of the launcher itself.
#
class Usage_error(Error):
    pass


################################################################################
# Failures of system calls: creating the temporary file, opening and reading
# the source, making the pipe, writing to it, spawning and waiting for
# children. The exit code of the launcher is the errno.
#
class Resource_error(Error):
    def __init__(self, errno, path, operation = None):
        super().__init__()
        self.errno = errno
        self.path = path
        self.operation = operation

    @classmethod
    def from_os_error(cls, e, path, operation = None):
        return cls(e.errno, path, operation)

    def what(self):
        if self.errno is None:
            return 'unknown system error'
        return os.strerror(self.errno)

    def exit_code(self):
        return (self.errno or 1)

class Source_open_error(Resource_error):
    pass


################################################################################
# Children that did not exit cleanly. Their status is propagated untouched.
#
class Child_failure(Error):
    def __init__(self, status):
        super().__init__()
        self.status = status

    def what(self):
        return '{}: status {}'.format(super().what(), self.status)

    def exit_code(self):
        return self.status

class Compile_failure(Child_failure):
    pass

class Runtime_failure(Child_failure):
    pass
