import os
import sys
import tempfile


COMPILER = 'g++'
LANGUAGE = 'c++'

# Same template the launcher has always used, mkstemp fills in the suffix.
ARTIFACT_PREFIX = 'c++run-'

OPTION_PREFIX = '-'


class Colour:
    Auto = 'auto'
    Always = 'always'
    Never = 'never'

Valid_colour_modes = (
    Colour.Auto,
    Colour.Always,
    Colour.Never,
)


def compiler():
    return os.environ.get('CXXRUN_COMPILER') or COMPILER

def language():
    return os.environ.get('CXXRUN_LANGUAGE') or LANGUAGE

def temporary_directory():
    return os.environ.get('CXXRUN_TMPDIR') or tempfile.gettempdir()

def verbose():
    v = os.environ.get('CXXRUN_VERBOSE', 'false')
    return v.lower() in ('1', 'true', 'yes',)

def colour_mode():
    v = os.environ.get('CXXRUN_COLOUR', Colour.Auto)
    if v not in Valid_colour_modes:
        return Colour.Auto
    return v

def use_colour(stream = None):
    stream = (stream if stream is not None else sys.stderr)
    mode = colour_mode()
    if mode == Colour.Always:
        return True
    if mode == Colour.Never or 'NO_COLOR' in os.environ:
        return False
    return stream.isatty()

def dump():
    return (
        ('CXXRUN_COMPILER', compiler(),),
        ('CXXRUN_LANGUAGE', language(),),
        ('CXXRUN_TMPDIR', temporary_directory(),),
        ('CXXRUN_VERBOSE', ('true' if verbose() else 'false'),),
        ('CXXRUN_COLOUR', colour_mode(),),
    )

# Variables to consider:
#
#   CXXRUN_COMPILER
#       Compiler executable. Must accept "-x LANGUAGE -" to read the program
#       from standard input and "-o PATH" to name the output executable.
#
#   CXXRUN_LANGUAGE
#       Language name passed with -x, e.g. "c" to run C programs.
#
#   CXXRUN_TMPDIR
#       Where the temporary executables are created.
#
#   CXXRUN_VERBOSE
#       Show the compiler command line and the artifact lifecycle.
#
#   CXXRUN_COLOUR
#       One of auto, always, never.
