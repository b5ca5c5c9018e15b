# -*- coding: utf-8; -*-

"""The ``httprange`` command: check range headers in captured exchanges."""

import argparse
import logging
import sys
import traceback

import httprange
from httprange import inputs, reports
from httprange.exchange import check_exchange
from httprange.notice import Severity


log = logging.getLogger(__name__)


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog=u'httprange',
        description=u'Check the Range, Content-Range and Accept-Ranges '
                    u'headers of HTTP exchanges against RFC 7233.')
    parser.add_argument(u'--version', action='version',
                        version=u'HTTPRange %s' % httprange.__version__)
    parser.add_argument(u'-i', u'--input', choices=sorted(inputs.formats),
                        default=u'combined', metavar=u'FORMAT',
                        help=u'how the input files are laid out '
                             u'(default: %(default)s)')
    parser.add_argument(u'-o', u'--output', choices=sorted(reports.formats),
                        default=u'text',
                        help=u'report format (default: %(default)s)')
    parser.add_argument(u'-s', u'--silence', metavar=u'ID', type=int,
                        action='append', default=[],
                        help=u'do not report this notice (may be repeated)')
    parser.add_argument(u'--fail-on', metavar=u'SEVERITY',
                        choices=[severity.name for severity in Severity],
                        help=u'exit with status 1 if any notice '
                             u'of this or a higher severity is reported')
    parser.add_argument(u'--full-traceback', action='store_true',
                        help=u'print the traceback of input errors')
    parser.add_argument(u'-v', u'--verbose', action='store_true',
                        help=u'log progress to stderr')
    parser.add_argument(u'path', nargs='+', help=u'an input file')
    return parser.parse_args(argv[1:])


def run_cli(args, stdout, stderr):
    """Check the exchanges from `args.path` and write the report to `stdout`.

    :return: the exit status.
    """
    read = inputs.formats[args.input]
    report = reports.formats[args.output]
    reported = set()

    def checked_exchanges():
        for exch in read(args.path):
            exch.silence(args.silence)
            check_exchange(exch)
            for obj in exch.walk():
                reported.update(c.severity for c in obj.complaints)
            yield exch

    try:
        # Reports are UTF-8 whatever the terminal's encoding,
        # so they go to the underlying binary stream.
        report(checked_exchanges(), stdout.buffer)
    except (EnvironmentError, inputs.InputError) as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write(u'httprange: %s\n' % exc)
        return 1

    log.debug('severities reported: %s',
              u', '.join(s.name for s in sorted(reported)) or u'none')
    if args.fail_on is not None and reported and \
            max(reported) >= Severity[args.fail_on]:
        return 1
    return 0


def configure_logging(args, stderr):
    handler = logging.StreamHandler(stderr)
    handler.setFormatter(logging.Formatter(u'httprange: %(name)s: %(message)s'))
    logger = logging.getLogger('httprange')
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write(u'httprange: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    configure_logging(args, sys.stderr)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
