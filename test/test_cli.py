# -*- coding: utf-8; -*-

import logging
import os

import pytest

import httprange.cli
from httprange.util.text import MockStdio


base_path = os.path.dirname(__file__)


def run(options, relative_paths):
    argv = ['httprange'] + options + [os.path.join(base_path, relative_path)
                                      for relative_path in relative_paths]
    stdout = MockStdio()
    stderr = MockStdio()
    args = httprange.cli.parse_args(argv)
    exit_status = httprange.cli.run_cli(args, stdout, stderr)
    return (exit_status, stdout.buffer.getvalue(), stderr.buffer.getvalue())


def test_basic():
    (code, stdout, stderr) = run(['-i', 'combined'],
                                 ['combined_data/simple_ok'])
    assert code == 0
    assert stdout == b''
    assert stderr == b''


def test_basic_html():
    (code, stdout, stderr) = run(['-o', 'html'], ['combined_data/simple_ok'])
    assert code == 0
    assert b'<!DOCTYPE html' in stdout
    assert b'Content-Range' in stdout
    assert stderr == b''


def test_text_output():
    (code, stdout, _) = run([], ['combined_data/simple_ok',
                                 'combined_data/1012_1'])
    assert code == 0
    assert stdout == (
        b'------------ request: GET /video.mp4\n'
        b'------------ response: 206 Partial Content\n'
        b'E 1012 206 response with a range that was not requested\n'
    )


def test_fail_on():
    (code, stdout, stderr) = run(['--fail-on=comment'],
                                 ['combined_data/simple_ok'])
    assert code == 0
    assert stdout == b''
    assert stderr == b''

    (code, stdout, stderr) = run(['--fail-on=comment'],
                                 ['combined_data/simple_ok',
                                  'combined_data/1002_1'])
    assert code == 0
    assert b'D 1002' in stdout
    assert stderr == b''

    (code, stdout, stderr) = run(['--fail-on=comment'],
                                 ['combined_data/simple_ok',
                                  'combined_data/1015_1'])
    assert code > 0
    assert b'C 1015' in stdout
    assert stderr == b''

    (code, stdout, stderr) = run(['--fail-on=error'],
                                 ['combined_data/1015_1',
                                  'combined_data/1007_1'])
    assert code > 0
    assert b'C 1015' in stdout
    assert b'E 1007' in stdout


def test_silence():
    (code, stdout, stderr) = run(['-s', '1015', '--fail-on=debug'],
                                 ['combined_data/1015_1'])
    assert code == 0
    assert stdout == b''
    assert stderr == b''

    (code, stdout, _) = run(['-s', '1004', '--silence', '1007'],
                            ['combined_data/1004_1', 'combined_data/1007_1'])
    assert code == 0
    assert stdout == b''


def test_bad_combined_file():
    (code, stdout, stderr) = run([], ['bad_data/no_markers'])
    assert code > 0
    assert stdout == b''
    assert stderr.startswith(b'httprange: ')
    assert b'bad combined file' in stderr

    (code, stdout, stderr) = run([], ['bad_data/bad_request_line'])
    assert code > 0
    assert b'bad request line' in stderr


def test_missing_file():
    (code, stdout, stderr) = run([], ['combined_data/no_such_file'])
    assert code > 0
    assert stdout == b''
    assert stderr.startswith(b'httprange: ')


def test_version(capsys):
    with pytest.raises(SystemExit):
        httprange.cli.parse_args(['httprange', '--version'])
    assert httprange.__version__ in capsys.readouterr().out


def test_verbose():
    stderr = MockStdio()
    args = httprange.cli.parse_args(
        ['httprange', '-v', os.path.join(base_path, 'combined_data/1012_1')])
    httprange.cli.configure_logging(args, stderr)
    try:
        httprange.cli.run_cli(args, MockStdio(), stderr)
    finally:
        logger = logging.getLogger('httprange')
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    assert b'httprange: httprange.inputs.combined: ' in stderr.buffer.getvalue()
