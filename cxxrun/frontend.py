import os
import sys

import cxxrun
import cxxrun.logs
import cxxrun.util.help
import cxxrun.util.log

from cxxrun import env, errors, launcher


EXECUTABLE = 'cxxrun'

USAGE = '''
Usage: {executable} [options] source.cpp [arguments]

source.cpp is compiled to a temporary executable,
with any options passed to {compiler}. Then the executable
is run with the arguments given.

To make a C++ source file into a standalone executable,
add the following on the first line:

\t#!/usr/bin/env -S {executable} -Wall -Werror -O3

'''

HELP = '''{NAME}
    {executable} - compile a source file and run it as a program

{SYNOPSIS}
    {exec_tool} [%arg(option)...] %arg(source) [%arg(argument)...]
    {exec_blank} --env
    {exec_blank} --version
    {exec_blank} --help

{DESCRIPTION}
    %text
    The source file is compiled to a temporary executable which is then run
    with the arguments given after the source file. The first line of the
    source file is skipped before the rest is handed to the compiler on its
    standard input, so it can hold an interpreter directive naming this
    program. The temporary executable is removed when the program exits.

    %text
    Every argument before the source file that starts with a dash is passed
    to the compiler. The options are joined and split again on whitespace
    because a directive line delivers all of them as a single argument.

{OPTIONS}
    %opt(--help)
        Display this message. Only recognised as the sole argument.

    %opt(--version)
        Display version information. Only recognised as the sole argument.

    %opt(--env)
        %text
        Display the configuration the launcher will use. Only recognised as
        the sole argument.

{ENVIRONMENT}
    %fg(man_var)CXXRUN_COMPILER%r
        Compiler executable, %fg(man_const)g++%r by default.

    %fg(man_var)CXXRUN_LANGUAGE%r
        Language passed with %fg(man_const)-x%r, %fg(man_const)c++%r by default.

    %fg(man_var)CXXRUN_TMPDIR%r
        Directory for temporary executables.

    %fg(man_var)CXXRUN_VERBOSE%r
        Set to %fg(man_const)true%r to show the compiler command line.

    %fg(man_var)CXXRUN_COLOUR%r
        One of %fg(man_const)auto%r, %fg(man_const)always%r, %fg(man_const)never%r.

{EXIT_STATUS}
    %text
    The exit status of the program that was run. If compilation fails, the
    exit status of the compiler. 1 when no source file is given. The system
    error number when a file, pipe or process could not be handled. A program
    killed by a signal makes the launcher exit with 128 plus the signal
    number.

{EXAMPLES}
    %text
    Put the directive on the first line of the source and make it
    executable:

        %fg(source)$ cat answer.cpp
        %fg(source)#!/usr/bin/env -S cxxrun -Wall -O2
        %fg(source)int main() {{ return 42; }}
        %fg(source)$ chmod +x answer.cpp
        %fg(source)$ ./answer.cpp; echo $?
        %fg(source)42

{COPYRIGHT}
    %copyright(2005) Ben Williamson

    %text
    This is Free Software.
'''


def print_usage(executable_name, stream = None):
    stream = (stream if stream is not None else sys.stderr)
    stream.write(USAGE.format(
        executable = executable_name,
        compiler = env.compiler(),
    ))

def report(executable_name, result):
    error = result.error

    if isinstance(error, errors.Usage_error):
        for each in error.notes():
            cxxrun.util.log.note(each)
        print_usage(executable_name)
    elif isinstance(error, errors.Resource_error):
        cxxrun.util.log.error(error.what(), path = error.path)
        for each in error.notes():
            cxxrun.util.log.note(each, path = error.path)
        if error.operation is not None:
            cxxrun.logs.verbose('{} failed'.format(error.operation), path = error.path)
    else:
        # The compiler or the program has already explained itself on stderr.
        cxxrun.logs.verbose(error.what())

def main(executable_name, args):
    executable_name = os.path.basename(executable_name) or EXECUTABLE

    if args == ['--version']:
        print('{} version {} ({})'.format(
            EXECUTABLE,
            cxxrun.__version__,
            cxxrun.__commit__,
        ))
        sys.exit(0)

    if args == ['--help']:
        cxxrun.util.help.print_help(
            EXECUTABLE,
            suite = cxxrun.suite,
            version = cxxrun.__version__,
            text = HELP,
        )
        sys.exit(0)

    if args == ['--env']:
        for name, value in env.dump():
            print('{}={}'.format(name, value))
        sys.exit(0)

    result = launcher.run(args)
    if not result.ok:
        report(executable_name, result)
    sys.exit(result.exit_code)

def console():
    main(sys.argv[0], sys.argv[1:])
