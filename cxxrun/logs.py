import cxxrun.util.log

from cxxrun import env


def verbose(s, path = None):
    if env.verbose():
        cxxrun.util.log.debug(s, path = path)

def warn(s, path = None):
    cxxrun.util.log.warning(s, path = path)
