"""
Command line entry point: lz78-encode [input] [options]
"""
import argparse
import logging
import sys

from lz78_encoding.dictionaries.registry import DICTIONARIES
from lz78_encoding.input_buffer import InputBuffer
from lz78_encoding.LZ78 import LZ78Encoder
from lz78_encoding.reporter import OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='LZ78 encoder')
    parser.add_argument('input', nargs='?', default='-',
                        help="file to encode, '-' for standard input")
    parser.add_argument('-o', '--output', help='write factors here instead of standard output')
    parser.add_argument('-d', '--dictionary', default='trie', choices=list(DICTIONARIES),
                        help='phrase dictionary backend')
    parser.add_argument('--format', dest='output_format', default='text', choices=OUTPUT_FORMATS)
    parser.add_argument('--flush-tail', action='store_true',
                        help='emit a final factor when the input ends inside a known phrase')
    parser.add_argument('--timing', action='store_true', help='report elapsed time')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        encoder = LZ78Encoder(
            dictionary=args.dictionary,
            output_format=args.output_format,
            flush_tail=args.flush_tail,
            timing=args.timing,
        )
        if args.input == '-':
            buffer = InputBuffer.from_stream(sys.stdin.buffer)
        else:
            buffer = InputBuffer.from_file(args.input)

        if args.output:
            with open(args.output, 'wb') as out_file:
                summary = encoder.write_buffer(buffer, out_file)
        else:
            summary = encoder.write_buffer(buffer, sys.stdout.buffer)
            sys.stdout.buffer.flush()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(summary, file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
