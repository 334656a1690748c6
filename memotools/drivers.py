""" Command line drivers.  Each parses its positional arguments as numbers
    and prints a single computed value on stdout.
"""
import math
import sys

import psutil

import memotools.apptools
from memotools.memoize import memoize
from memotools.numeric import (
    avg,
    fib,
    fib_memo,
    format_number,
    parse,
    parse_all,
    slow_func,
    sum_,
)
from memotools.timing import Timer

KINDS = {"int": int, "float": float}


def add_number_arguments(cap, help="Numbers to operate on"):
    cap.add("numbers", nargs="*", help=help)
    cap.add(
        "--kind",
        choices=sorted(KINDS),
        default="float",
        help="Number type the arguments are parsed as")


def add_fib_arguments(cap):
    add_number_arguments(cap, help="Which Fibonacci number to print. Extra arguments are ignored.")
    cap.add(
        "--naive",
        action="store_true",
        default=False,
        help="Use the exponential non-memoized Fibonacci")


def add_memo_arguments(cap):
    add_number_arguments(cap, help="Seconds the slow function sleeps for")
    cap.add(
        "--repeat",
        type=int,
        default=8,
        help="How many times to call the memoized slow function")


def _error(message):
    sys.stderr.write("Error: " + message + "\n")
    return 1


def _parse_numbers(args):
    return parse_all(args.numbers, KINDS[args.kind])


def _run(description, add_arguments, compute, argv=None):
    cap = memotools.apptools.create_parser(description)
    add_arguments(cap)
    args = memotools.apptools.parseargs(cap, argv)
    try:
        result = compute(args)
    except (ValueError, OverflowError) as err:
        # ParseError included
        return _error(str(err))

    if result is not None:
        print(format_number(result))
    return 0


def _sum(args):
    return sum_(_parse_numbers(args))


def _avg(args):
    return avg(_parse_numbers(args))


def _fib(args):
    if not args.numbers:
        return None
    # Only the first argument is ever looked at
    n = parse(args.numbers[0], KINDS[args.kind], position=1)
    if args.naive:
        return fib(n)
    return fib_memo(n)


def _memo(args):
    if not args.numbers:
        raise ValueError("the number of seconds to sleep is required")
    seconds = parse(args.numbers[0], KINDS[args.kind], position=1)
    if not math.isfinite(seconds):
        raise ValueError("seconds must be finite, got " + format_number(seconds))
    if seconds < 0:
        raise ValueError("seconds must not be negative, got " + format_number(seconds))
    if args.repeat < 1:
        raise ValueError("repeat must be at least 1, got " + str(args.repeat))

    timer = Timer(enabled=args.verbose >= 1)
    slow_func_memo = memoize(slow_func)
    # The first call evaluates the slow function,
    # subsequent calls return the cached value
    with timer.time_operation("memoized calls"):
        for ii in range(1, args.repeat + 1):
            with timer.time_operation("call " + str(ii)):
                result = slow_func_memo(seconds)

    if args.verbose >= 1:
        timer.report(args.verbose)
        sys.stderr.write(str(slow_func_memo.cache_info()) + "\n")
    if args.verbose >= 3:
        rss = psutil.Process().memory_info().rss
        sys.stderr.write("Process RSS: " + str(rss) + " bytes\n")
    return result


def main_sum(argv=None):
    return _run("Print the sum of the given numbers", add_number_arguments, _sum, argv)


def main_avg(argv=None):
    return _run("Print the average of the given numbers", add_number_arguments, _avg, argv)


def main_fib(argv=None):
    return _run("Print the nth Fibonacci number", add_fib_arguments, _fib, argv)


def main_memo(argv=None):
    return _run(
        "Call a slow function through the memoizer several times "
        "with the same argument and print its value",
        add_memo_arguments,
        _memo,
        argv)
