import re
import shutil
import sys

import cxxrun.util.colors

from cxxrun import env


FG = re.compile(r'%fg\(([a-z][a-z_]+(?:_[1-4][ab]?)?)\)')
ATTR_RESET = re.compile(r'%r\b')
ARG = re.compile(r'%arg\(([a-z]+(?:[-_][a-z]+)*)\)')
OPT = re.compile(r'%opt\((--[a-z][a-z0-9]+|-[a-z0-9])\)')
TEXT = '%text'
COPYRIGHT = re.compile(r'%copyright\((\d+(?:-\d+)?(?:, \d+(?:-\d+)?)*)\)')

# Set this to 0 to allow stretching to actual terminal width.
MAX_COLUMN_COUNT = 100

MAN_SECTION_COLOR = 'light_red'
MAN_CONST_COLOR = 'green_3b'
MAN_VAR_COLOR = 'green_1'
OPT_COLOR = 'white'
SOURCE_COLOR = 'white'


def clear(s):
    s = re.sub(FG, '', s)
    s = re.sub(ATTR_RESET, '', s)
    s = re.sub(ARG, lambda m: '<{}>'.format(m.group(1)), s)
    s = re.sub(OPT, lambda m: '{}'.format(m.group(1)), s)
    s = re.sub(COPYRIGHT, lambda m: 'Copyright © {}'.format(m.group(1)), s)
    return s

def reflow_paragraph(input_lines, column_count):
    indent = (len(input_lines[0]) - len(input_lines[0].lstrip()))
    words = ' '.join(map(str.strip, input_lines)).split()

    output_lines = []
    i = 0
    while i < len(words):
        line = []
        line_length = indent

        while i < len(words):
            printed_word = clear(words[i])
            next_line_length = (line_length + (1 if line else 0) + len(printed_word))
            if (next_line_length <= column_count) or not line:
                line.append(words[i])
                line_length = next_line_length
                i += 1
            else:
                break
        output_lines.append('{}{}'.format((' ' * indent), ' '.join(line)))

    return output_lines

def reflow(text, column_count):
    """Rewrap every paragraph marked with %text to fit column_count.

    A paragraph runs from the line after the marker up to the next blank
    line. Other lines are left alone.
    """
    output_lines = []

    source_lines = text.split('\n')
    i = 0
    while i < len(source_lines):
        line = source_lines[i]
        i += 1

        if line.strip() != TEXT:
            output_lines.append(line)
            continue

        paragraph = []
        while i < len(source_lines) and source_lines[i].strip():
            paragraph.append(source_lines[i])
            i += 1
        if paragraph:
            output_lines.extend(reflow_paragraph(paragraph, column_count))

    return '\n'.join(output_lines)

def terminal_columns():
    return (shutil.get_terminal_size((80, 24,)).columns - 2)

def print_help(executable, suite, version, text, stream = None, column_count = None):
    stream = (stream if stream is not None else sys.stdout)
    use_colour = env.use_colour(stream)

    def colorise(color, s):
        return (cxxrun.util.colors.colorise(color, s, stream) if use_colour else s)

    COLUMN_COUNT = (column_count if column_count is not None else terminal_columns())
    if MAX_COLUMN_COUNT:
        COLUMN_COUNT = min((MAX_COLUMN_COUNT, COLUMN_COUNT,))

    man_title = '{} Manual'.format(suite)
    man_executable = '{}(1)'.format(executable.upper())

    man_padding = max(1, (COLUMN_COUNT - len(man_title) - (2 * len(man_executable))) // 2)
    bottom_padding = max(1,
        COLUMN_COUNT - len(suite) - len(version) - len(man_executable) - 1)

    text = reflow(text, COLUMN_COUNT)

    def map_color(color):
        return {
            'man_se': MAN_SECTION_COLOR,
            'man_const': MAN_CONST_COLOR,
            'man_var': MAN_VAR_COLOR,
            'source': SOURCE_COLOR,
        }.get(color, color)

    for color in set(re.findall(FG, text)):
        text = text.replace(
            '%fg({})'.format(color),
            (cxxrun.util.colors.fg(map_color(color)) if use_colour else ''))
    text = re.sub(ATTR_RESET, (cxxrun.util.colors.reset() if use_colour else ''), text)
    text = re.sub(
        ARG, lambda m: '<{}>'.format(colorise(MAN_VAR_COLOR, m.group(1))), text)
    text = re.sub(
        OPT, lambda m: '{}'.format(colorise(OPT_COLOR, m.group(1))), text)
    text = re.sub(
        COPYRIGHT, lambda m: 'Copyright © {}'.format(m.group(1)), text)

    def format_help(text):
        return text.format(
            executable = executable,
            exec_tool = colorise(MAN_CONST_COLOR, executable),
            exec_blank = (' ' * len(executable)),

            man_exec = man_executable,
            man_title = man_title,
            man_pad = (' ' * man_padding),

            suite = suite,
            version = version,
            bottom_pad = (' ' * bottom_padding),

            NAME = colorise(MAN_SECTION_COLOR, 'NAME'),
            SYNOPSIS = colorise(MAN_SECTION_COLOR, 'SYNOPSIS'),
            DESCRIPTION = colorise(MAN_SECTION_COLOR, 'DESCRIPTION'),
            OPTIONS = colorise(MAN_SECTION_COLOR, 'OPTIONS'),
            ENVIRONMENT = colorise(MAN_SECTION_COLOR, 'ENVIRONMENT'),
            EXIT_STATUS = colorise(MAN_SECTION_COLOR, 'EXIT STATUS'),
            EXAMPLES = colorise(MAN_SECTION_COLOR, 'EXAMPLES'),
            COPYRIGHT = colorise(MAN_SECTION_COLOR, 'COPYRIGHT'),
        )

    top_line = '{man_exec}{man_pad}{man_title}{man_pad}{man_exec}\n\n'
    bottom_line = '\n{suite} {version}{bottom_pad}{man_exec}\n'
    stream.write(format_help(top_line))
    stream.write(format_help(text))
    stream.write(format_help(bottom_line))
