import errno
import os

import cxxrun.logs

from cxxrun import errors, feeder, process
from cxxrun.result import Ok, Err


def compile_stage(invocation, source_name, stream, chunk_size = feeder.CHUNK_SIZE):
    try:
        read_end, write_end = os.pipe()
    except OSError as e:
        return Err(errors.Resource_error.from_os_error(e, source_name, 'pipe'))

    # The write end is not inheritable, so the compiler only holds the read
    # end and sees end of input as soon as the parent closes its side.
    try:
        child = process.spawn(invocation[0], invocation, stdin = read_end)
    except OSError as e:
        os.close(write_end)
        return Err(errors.Resource_error.from_os_error(e, source_name, 'spawn'))
    finally:
        os.close(read_end)

    try:
        forwarded = feeder.feed(stream, write_end, chunk_size, path = source_name)
        cxxrun.logs.verbose('fed {} byte(s) to the compiler'.format(forwarded),
            path = source_name)
    except errors.Resource_error as e:
        if e.errno == errno.EPIPE:
            # The compiler stopped reading; its own status says why.
            status = child.reap()
            if status:
                return Err(errors.Compile_failure(status))
        else:
            child.terminate()
            child.reap()
        return Err(e)
    finally:
        os.close(write_end)

    try:
        status = child.wait()
    except OSError as e:
        return Err(errors.Resource_error.from_os_error(e, source_name, 'wait'))

    if status != 0:
        return Err(errors.Compile_failure(status))
    return Ok(0)

def execute_stage(artifact_path, program_args, source_name):
    try:
        child = process.spawn(artifact_path, program_args)
    except OSError as e:
        return Err(errors.Resource_error.from_os_error(e, source_name, 'spawn'))

    try:
        status = child.wait()
    except OSError as e:
        return Err(errors.Resource_error.from_os_error(e, source_name, 'wait'))

    if status != 0:
        return Err(errors.Runtime_failure(status))
    return Ok(0)
