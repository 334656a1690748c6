import sys

import configargparse
import rich.console
import rich.table

from memotools.version import __version__
import memotools.configutils


def add_base_arguments(cap):
    cap.add(
        "-v",
        "--verbose",
        help="Output verbosity. Add more v's to make it more verbose",
        action="count",
        default=0)
    cap.add(
        "-q",
        "--quiet",
        help="Decrement verbosity. Useful in apps where the default verbosity > 0.",
        action="count",
        default=0)
    cap.add(
        "--version",
        action="version",
        version=__version__)
    cap.add(
        "-?",
        action='help',
        help='Help')


def create_parser(description, user_config_dir=None, system_config_dir=None):
    """ Create the configargparse singleton with the memotools.conf files and
        MEMOTOOLS_* environment variables wired in.
        Remember that the hierarchy of values is
        command line > environment variables > config file values > defaults
    """
    cap = configargparse.getArgumentParser(
        description=description,
        formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        auto_env_var_prefix="MEMOTOOLS_",
        default_config_files=memotools.configutils.default_config_files(
            user_config_dir=user_config_dir,
            system_config_dir=system_config_dir,
        ),
        args_for_setting_config_path=["-c", "--config"],
        ignore_unknown_config_file_keys=True,
    )
    add_base_arguments(cap)
    return cap


def _commonsubstitutions(args):
    args.verbose -= args.quiet


# List to store the callback functions for parse args
_substitutioncallbacks = [_commonsubstitutions]


def resetcallbacks():
    """ Useful in tests to clear out the substitution callbacks """
    global _substitutioncallbacks
    _substitutioncallbacks = [_commonsubstitutions]


def registercallback(callback):
    """ Use this to register a function to be called back during the
        substitutions call (usually during parseargs).
        The callback function will later be given "args" as its argument.
    """
    _substitutioncallbacks.append(callback)


def substitutions(args, verbose=None):
    for func in _substitutioncallbacks:
        func(args)

    if verbose is None:
        verbose = args.verbose
    if verbose >= 2:
        verboseprintconfig(args)


def parseargs(cap, argv=None, verbose=None):
    args = cap.parse_args(args=argv)
    substitutions(args, verbose)
    return args


def verboseprintconfig(args):
    if args.verbose >= 3:
        cap = configargparse.getArgumentParser()
        cap.print_values(file=sys.stderr)

    if args.verbose >= 2:
        verbose_print_args(args)


def verbose_print_args(args, console=None):
    """ Print the args in two columns Attr: Value.
        Goes to stderr so that stdout only carries the computed result.
    """
    if console is None:
        console = rich.console.Console(file=sys.stderr)

    title = "Final aggregated arguments"
    table = rich.table.Table(title=title, show_header=False, min_width=len(title) + 4)
    table.add_column("Attr", style="bold")
    table.add_column("Value", overflow="fold")
    for attr, value in sorted(vars(args).items()):
        table.add_row(attr, "" if value is None else str(value))
    console.print(table)
