import sys

import cxxrun.util.colors


KINDS = {
    'error': 'red',
    'debug': 'green',
    'warning': 'orange_red_1',
    'note': 'cyan',
}


def make_prefix(kind, path):
    if path is not None and type(path) is not str:
        raise TypeError('invalid path: {}: {}'.format(
            type(path).__name__, path))

    prefix = ''
    if path is not None:
        prefix = cxxrun.util.colors.colorise('white', path)

    if kind is not None:
        colored_kind = cxxrun.util.colors.colorise(KINDS[kind], kind)
        if prefix:
            prefix = '{}: {}'.format(prefix, colored_kind)
        else:
            prefix = colored_kind

    return prefix

def _write(kind, s, path):
    sys.stderr.write('{}: {}\n'.format(
        make_prefix(kind, path),
        s,
    ))

def error(s, path = None):
    _write('error', s, path)

def debug(s, path = None):
    _write('debug', s, path)

def note(s, path = None):
    _write('note', s, path)

def warning(s, path = None):
    _write('warning', s, path)
