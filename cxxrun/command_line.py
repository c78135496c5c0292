from cxxrun import errors


# Tokens appended after the user's options: read the program from standard
# input as LANGUAGE and write the executable to the temporary path.
def fixed_tail(language, output_path):
    return ['-x', language, '-', '-o', output_path]

def split_invocation(args, prefix = '-'):
    """Find the source file in the launcher's arguments.

    Every token before the first one that does not start with `prefix` is
    a compiler option. Returns a tuple of (index of the source file,
    option tokens in their original order).
    """
    source_index = 0
    while source_index < len(args) and args[source_index].startswith(prefix):
        source_index += 1

    if source_index >= len(args):
        raise errors.Usage_error().note('no source file given')

    return (source_index, list(args[:source_index]),)

def build_compiler_invocation(options, output_path, compiler, language):
    # When run from a directive line the kernel hands over everything after
    # the interpreter path as a single argument, so join and split again.
    split_options = ' '.join(options).split()
    return ([compiler] + split_options + fixed_tail(language, output_path))
