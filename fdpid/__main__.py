"""
Print the PID of the processes at the other end of a pipe.

examples:
  cat /dev/zero | cat - > /dev/null &
  fdpid 0 $!
        Prints the PID of the first `cat` process.
  fdpid 1 $(fdpid 0 $!)
        Prints the PID of the second `cat` process.

  (yes a & yes b) | cat >/dev/null &
  fdpid 0 $!
        Prints the PID of both `yes` processes and the enclosing shell,
        all of which are connected to `cat`'s standard input.
"""

import traceback
import argparse
import logging
import sys
import os

import pwnlib.context
import pwnlib.log

import fdpid
from fdpid.errors import EX_USAGE, EX_SOFTWARE

pwnlib.log.install_default_handler()

_LOG = logging.getLogger("fdpid")

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        raise fdpid.UsageError(f"{self.prog}: {message}")

class UsageHelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None): #pylint:disable=redefined-builtin
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        parser.exit(EX_USAGE)

def descriptor_number(value):
    try:
        fd = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid file descriptor: {value!r}") #pylint:disable=raise-missing-from
    if fd < 0:
        raise argparse.ArgumentTypeError(f"file descriptor must not be negative: {value!r}")
    return fd

def process_id(value):
    try:
        pid = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid process ID: {value!r}") #pylint:disable=raise-missing-from
    if pid <= 0:
        raise argparse.ArgumentTypeError(f"process ID must be positive: {value!r}")
    return pid

def make_parser():
    parser = ArgumentParser(
        prog="fdpid",
        description=__doc__.split("\n\n", 1)[0].strip(),
        epilog=__doc__.split("\n\n", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action=UsageHelpAction,
        help="print this documentation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print the path of each matched file descriptor before its PID",
    )
    parser.add_argument(
        "-d",
        "--debug-output",
        action="store_true",
        help="print out debugging information",
    )
    parser.add_argument(
        "-C",
        "--container",
        help="inspect the processes of this running docker container instead of the host",
        default=os.environ.get("FDPID_CONTAINER", None),
    )
    parser.add_argument(
        "--proc-root",
        help="where the process filesystem is mounted (default: %(default)s)",
        default=os.environ.get("FDPID_PROC_ROOT", "/proc"),
    )
    parser.add_argument("fd", metavar="FD", type=descriptor_number, help="the file descriptor number")
    parser.add_argument("pid", metavar="PID", type=process_id, help="the process ID owning FD")
    return parser

def setup_logging(debug=False):
    if pwnlib.log.console not in _LOG.handlers:
        _LOG.addHandler(pwnlib.log.console)
    # level 1 defers filtering to the pwntools context
    _LOG.setLevel(1)
    pwnlib.context.context.log_console = sys.stderr
    pwnlib.context.context.log_level = "DEBUG" if debug else "ERROR"

def make_environment(args):
    if args.container:
        return fdpid.DockerEnvironment(args.container)
    return fdpid.BareEnvironment(proc_root=args.proc_root)

def main(argv=None):
    parser = make_parser()
    try:
        args = parser.parse_args(argv)
    except fdpid.UsageError as e:
        setup_logging()
        _LOG.error("%s", e)
        return e.exit_code

    setup_logging(debug=args.debug_output)
    options = fdpid.ResolverOptions(verbose=args.verbose)
    _LOG.debug("resolving fd %d of process %d with %r", args.fd, args.pid, options)

    try:
        with make_environment(args) as env:
            env.check()
            return fdpid.run(args.fd, args.pid, options, env=env)
    except fdpid.FdpidError as e:
        _LOG.error("%s", e)
        return e.exit_code
    except Exception: #pylint:disable=broad-exception-caught
        _LOG.error("%s", traceback.format_exc())
        return EX_SOFTWARE

if __name__ == "__main__":
    sys.exit(main())
