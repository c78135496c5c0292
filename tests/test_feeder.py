import io
import os

import pytest

from cxxrun import errors, feeder


def drain(fd):
    chunks = []
    while True:
        chunk = os.read(fd, 65536)
        if not chunk:
            break
        chunks.append(chunk)
    return b''.join(chunks)


@pytest.mark.parametrize('terminator', [b'\n', b'\r', b'\0'])
def test_directive_line_ends_at_any_terminator(terminator):
    stream = io.BytesIO(b'#!/usr/bin/env cxxrun' + terminator + b'int x;\n')
    assert feeder.skip_directive_line(stream) == 22
    assert stream.read() == b'int x;\n'

def test_only_the_first_terminator_is_consumed():
    stream = io.BytesIO(b'#!cxxrun\r\nbody')
    feeder.skip_directive_line(stream)
    assert stream.read() == b'\nbody'

def test_directive_without_terminator_consumes_whole_file():
    stream = io.BytesIO(b'#!cxxrun -O2')
    assert feeder.skip_directive_line(stream) == 12
    assert stream.read() == b''

def test_empty_file():
    assert feeder.skip_directive_line(io.BytesIO(b'')) == 0

@pytest.mark.parametrize('chunk_size', [1, 7, 4096, 100000])
def test_body_is_forwarded_unchanged(chunk_size):
    body = bytes(range(256)) * 40
    stream = io.BytesIO(b'#!/dummy\n' + body)
    feeder.skip_directive_line(stream)

    read_end, write_end = os.pipe()
    try:
        assert feeder.feed(stream, write_end, chunk_size) == len(body)
    finally:
        os.close(write_end)
    try:
        assert drain(read_end) == body
    finally:
        os.close(read_end)

def test_short_writes_are_retried(monkeypatch):
    written = []

    def short_write(fd, data):
        n = min(3, len(data))
        written.append(bytes(data[:n]))
        return n

    monkeypatch.setattr(os, 'write', short_write)
    feeder.write_all(99, b'abcdefghij')
    assert written == [b'abc', b'def', b'ghi', b'j']

def test_write_failure_is_a_resource_error():
    read_end, write_end = os.pipe()
    os.close(read_end)
    try:
        with pytest.raises(errors.Resource_error) as e:
            feeder.feed(io.BytesIO(b'data'), write_end, path = 'x.cpp')
    finally:
        os.close(write_end)
    assert e.value.path == 'x.cpp'
    assert e.value.exit_code() == e.value.errno

def test_read_failure_is_a_resource_error():
    class Broken:
        def read(self, n):
            raise OSError(5, 'Input/output error')

    with pytest.raises(errors.Resource_error) as e:
        feeder.skip_directive_line(Broken(), 'x.cpp')
    assert e.value.errno == 5
    assert e.value.operation == 'read'

def test_missing_source(tmp_path):
    with pytest.raises(errors.Source_open_error) as e:
        feeder.open_source(str(tmp_path / 'nope.cpp'))
    assert e.value.what() == os.strerror(e.value.errno)
    assert e.value.path.endswith('nope.cpp')
