import sys
import argparse
from randtest.analysis.symbolizer import Mode
from randtest.analysis.engine import analyze_source
from randtest.services.byte_source import ByteSourceFactory
from randtest.report.formatter import render_human, render_terse
from randtest.utils.exceptions import ArgumentError, RandtestError

def build_parser():
    parser = argparse.ArgumentParser(
        prog="randtest",
        description="Calculate entropy and randomness statistics of a file or standard input",
    )
    parser.add_argument('files', nargs='*', metavar='input-file', help="File to analyse (standard input if omitted)")
    parser.add_argument('-b', '--bits', action='store_true', help="Treat input as a stream of bits")
    parser.add_argument('-c', '--counts', action='store_true', help="Print occurrence counts")
    parser.add_argument('-f', '--fold', action='store_true', help="Fold upper to lower case letters")
    parser.add_argument('-t', '--terse', action='store_true', help="Terse output in CSV format")
    parser.add_argument('-u', action='help', help="Print this message")
    return parser

def run(args, stream=None):
    if len(args.files) > 1:
        raise ArgumentError("Duplicate file name.")
    path = args.files[0] if args.files else None
    source = ByteSourceFactory.create(path=path, fold=args.fold, stream=stream)
    mode = Mode.BIT if args.bits else Mode.BYTE
    report = analyze_source(source, mode)
    if args.terse:
        return render_terse(report, counts=args.counts)
    return render_human(report, counts=args.counts)

def main(argv=None, stream=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        output = run(args, stream=stream)
    except ArgumentError as e:
        print(e)
        parser.print_help()
        return 2
    except RandtestError as e:
        print(e)
        return 2

    print(output, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
