"""Top-level script environment."""
import argparse
import ast
import logging
import sys

from bitmanip.errors import BitManipulationError
from bitmanip.float64 import accessor
from bitmanip.integer import operation, printing, twos
from bitmanip.integer.core import ArbitraryInteger

logger = logging.getLogger("bitmanip")


def integer(text):
    """Parse an integer literal such as 135, 0xFF or 0b1010."""
    try:
        value = ast.literal_eval(text)
    except (ValueError, SyntaxError):
        value = None
    if not isinstance(value, int) or isinstance(value, bool):
        raise argparse.ArgumentTypeError("invalid integer: {!r}".format(text))
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog="bitmanip")
    parser.add_argument("-b", "--base", type=int, choices=[10, 2, 16], default=10)
    parser.add_argument("--big", action="store_true",
                        help="operate on the value as an arbitrary-precision integer")
    parser.add_argument("-v", "--verbose", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    for name in ["set", "clear", "flip"]:
        cmd = commands.add_parser(name)
        cmd.add_argument("value", type=integer)
        cmd.add_argument("positions", type=int, nargs="+")

    for name in ["xor", "or", "and"]:
        cmd = commands.add_parser(name)
        cmd.add_argument("value", type=integer)
        cmd.add_argument("other", type=integer)

    for name in ["not", "reverse"]:
        cmd = commands.add_parser(name)
        cmd.add_argument("value", type=integer)
        cmd.add_argument("-l", "--bit-length", type=int)

    for name in ["lshift", "rshift"]:
        cmd = commands.add_parser(name)
        cmd.add_argument("value", type=integer)
        cmd.add_argument("offset", type=int, nargs="?", default=1)

    cmd = commands.add_parser("bitlength")
    cmd.add_argument("value", type=integer)

    cmd = commands.add_parser("negative")
    cmd.add_argument("value", type=integer)

    cmd = commands.add_parser("float-bits")
    cmd.add_argument("value", type=float)

    return parser


def run(args):
    """Execute the command and return its result."""
    if args.command == "float-bits":
        return accessor.to_bits(args.value)

    value = ArbitraryInteger(args.value) if args.big else args.value

    if args.command == "set":
        return operation.set_bits(value, args.positions)
    elif args.command == "clear":
        return operation.clear_bits(value, args.positions)
    elif args.command == "flip":
        return operation.flip_bits(value, args.positions)
    elif args.command == "xor":
        return operation.bitwise_xor(value, args.other)
    elif args.command == "or":
        return operation.bitwise_or(value, args.other)
    elif args.command == "and":
        return operation.bitwise_and(value, args.other)
    elif args.command == "not":
        return operation.bitwise_not(value, args.bit_length)
    elif args.command == "reverse":
        return operation.reverse_bit_order(value, args.bit_length)
    elif args.command == "lshift":
        return operation.left_shift(value, args.offset)
    elif args.command == "rshift":
        return operation.right_shift(value, args.offset)
    elif args.command == "bitlength":
        return operation.bit_length(value)
    elif args.command == "negative":
        return twos.negative_integer_from_value(value)
    raise ValueError("invalid command {}".format(args.command))


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s: %(message)s",
    )
    logger.debug("running %s with %s", args.command, vars(args))

    try:
        result = run(args)
    except BitManipulationError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1

    if isinstance(result, accessor.FloatBitView):
        print(result)
    elif args.base == 2:
        print(printing.number_to_binary(result))
    elif args.base == 16:
        print(printing.number_to_hex(result))
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
