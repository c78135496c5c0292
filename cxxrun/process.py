import signal
import subprocess

import cxxrun.logs


def exit_status(returncode):
    # Popen reports death by signal N as -N; shells report it as 128 + N.
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class Child:
    def __init__(self, popen):
        self._popen = popen

    @property
    def pid(self):
        return self._popen.pid

    def wait(self):
        return exit_status(self._popen.wait())

    def terminate(self):
        self._popen.send_signal(signal.SIGTERM)

    def reap(self):
        try:
            return self.wait()
        except ChildProcessError as e:
            cxxrun.logs.verbose('could not reap child {}: {}'.format(self.pid, e))
            return None


def spawn(executable, args, stdin = None):
    """Start `executable` with `args` as its argument vector.

    `args[0]` is what the child sees as its own name and need not match
    `executable`. Standard output and error are inherited; standard input
    is inherited unless `stdin` (a file descriptor) is given. Raises
    OSError when the executable cannot be started.
    """
    popen = subprocess.Popen(
        args = tuple(args),
        executable = executable,
        stdin = stdin,
    )
    return Child(popen)
