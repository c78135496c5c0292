import os
import stat
import sys

import pytest


STUB_COMPILER = '''#!{python}
import json
import os
import sys

args = sys.argv[1:]
output_path = args[args.index('-o') + 1]
source = sys.stdin.buffer.read()

log_path = os.environ.get('STUB_COMPILER_LOG')
if log_path:
    with open(log_path, 'a') as ofstream:
        ofstream.write(json.dumps({{
            'args': args,
            'source': source.decode('utf-8', 'replace'),
        }}) + '\\n')

status = int(os.environ.get('STUB_COMPILER_STATUS', '0'))
if status:
    sys.stderr.write('stub: error: compilation failed\\n')
    sys.exit(status)

with open(output_path, 'wb') as ofstream:
    ofstream.write(b'#!/bin/sh\\n' + source)
os.chmod(output_path, 0o755)
'''


def make_executable(path, text):
    path.write_text(text)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse = True)
def quiet_environment(monkeypatch):
    monkeypatch.setenv('CXXRUN_COLOUR', 'never')
    for each in ('CXXRUN_COMPILER', 'CXXRUN_LANGUAGE', 'CXXRUN_TMPDIR',
            'CXXRUN_VERBOSE', 'STUB_COMPILER_STATUS', 'STUB_COMPILER_LOG',):
        monkeypatch.delenv(each, raising = False)


@pytest.fixture
def artifact_dir(tmp_path, monkeypatch):
    directory = tmp_path / 'artifacts'
    directory.mkdir()
    monkeypatch.setenv('CXXRUN_TMPDIR', str(directory))
    return directory


@pytest.fixture
def stub_compiler(tmp_path, monkeypatch, artifact_dir):
    """A compiler that turns its standard input into a shell script.

    Set STUB_COMPILER_STATUS to make it fail, STUB_COMPILER_LOG to record
    its arguments and input.
    """
    path = make_executable(tmp_path / 'stub-cc', STUB_COMPILER.format(
        python = sys.executable,
    ))
    monkeypatch.setenv('CXXRUN_COMPILER', str(path))
    return path


@pytest.fixture
def source(tmp_path):
    def write(body, directive = '#!/usr/bin/env cxxrun', name = 'program.cpp'):
        path = tmp_path / name
        path.write_bytes((directive + '\n' + body).encode('utf-8'))
        return path
    return write
