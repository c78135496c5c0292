import cxxrun.logs

from cxxrun import artifact, command_line, env, errors, feeder, stages
from cxxrun.result import Err


def run(args):
    """Compile the source file named in `args` and run the result.

    `args` are the launcher's arguments without its own name. Returns an
    Ok or Err whose exit_code is what the launcher should exit with.
    """
    try:
        source_index, options = command_line.split_invocation(
            args, env.OPTION_PREFIX)
    except errors.Usage_error as e:
        return Err(e)

    source_name = args[source_index]
    program_args = args[source_index:]

    try:
        with artifact.Artifact(source_name, env.temporary_directory()) as exe:
            invocation = command_line.build_compiler_invocation(
                options,
                exe.path,
                env.compiler(),
                env.language(),
            )
            cxxrun.logs.verbose(' '.join(invocation), path = source_name)

            with feeder.open_source(source_name) as stream:
                feeder.skip_directive_line(stream, source_name)
                result = stages.compile_stage(invocation, source_name, stream)

            if not result.ok:
                return result

            return stages.execute_stage(exe.path, program_args, source_name)
    except errors.Resource_error as e:
        return Err(e)
