import contextlib
import os

import colored

from cxxrun import env


# colored stays silent unless both standard streams are terminals, which is
# not what we want once we have decided to colour a particular stream.
@contextlib.contextmanager
def forced():
    saved = {name: os.environ.get(name) for name in ('FORCE_COLOR', 'NO_COLOR',)}
    os.environ['FORCE_COLOR'] = '1'
    os.environ.pop('NO_COLOR', None)
    try:
        yield
    finally:
        for name, value in saved.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value

def fg(color):
    with forced():
        return colored.fg(color)

def reset():
    with forced():
        return colored.attr('reset')

def colorise(color, s, stream = None):
    if (color is None) or not env.use_colour(stream):
        return s
    return '{}{}{}'.format(fg(color), s, reset())
