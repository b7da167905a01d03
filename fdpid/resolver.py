import collections
import logging
import enum
import sys

from .environments import BareEnvironment
from .errors import ProcessNotFound, DescriptorNotFound, EX_OK

_LOG = logging.getLogger(__name__)

Match = collections.namedtuple("Match", ["pid", "fd", "path"])

class ScanStatus(enum.Enum):
    NO_MATCH = "no-match"
    MATCH_FOUND = "match-found"
    UNREADABLE = "unreadable"

ScanResult = collections.namedtuple("ScanResult", ["status", "match"])

NO_MATCH = ScanResult(ScanStatus.NO_MATCH, None)
UNREADABLE = ScanResult(ScanStatus.UNREADABLE, None)

ResolverOptions = collections.namedtuple("ResolverOptions", ["verbose"], defaults=[False])

def resolve_target(target_pid, target_fd, env=None):
    """
    Resolves a (pid, fd) pair to the identity of the pipe behind it.

    Returns None when the descriptor exists but is not a pipe. Raises
    ProcessNotFound or DescriptorNotFound when the target does not exist.
    """
    env = env or BareEnvironment()

    if not env.isdir(env.process_path(target_pid)):
        raise ProcessNotFound(target_pid)

    target_fd_path = env.fd_path(target_pid, target_fd)
    if not env.islink(target_fd_path):
        raise DescriptorNotFound(target_pid, target_fd)

    try:
        target = env.readlink(target_fd_path)
    except OSError as e:
        raise DescriptorNotFound(target_pid, target_fd) from e

    if not env.is_pipe(target):
        _LOG.debug("%s -> %s is not a pipe", target_fd_path, target)
        return None

    _LOG.debug("%s -> %s", target_fd_path, target)
    return target

def scan_process(env, pid, target_identity, target_pid, target_fd):
    """
    Scans one process's descriptor table. The first unreadable descriptor
    abandons the rest of the table; the first peer descriptor ends the scan.
    """
    try:
        fds = env.descriptors(pid)
    except OSError as e:
        _LOG.debug("skipping process %d: %s", pid, e)
        return UNREADABLE

    for fd in fds:
        fd_path = env.fd_path(pid, fd)
        if not env.readable(fd_path):
            _LOG.debug("skipping rest of process %d: %s is unreadable", pid, fd_path)
            return UNREADABLE

        try:
            target = env.readlink(fd_path)
        except OSError as e:
            _LOG.debug("skipping rest of process %d: %s", pid, e)
            return UNREADABLE

        if target == target_identity and (pid, fd) != (target_pid, target_fd):
            return ScanResult(ScanStatus.MATCH_FOUND, Match(pid, fd, fd_path))

    return NO_MATCH

def find_peers(target_identity, target_pid, target_fd, env=None):
    """
    Yields a Match for every other process holding a descriptor on the same
    pipe, at most one per process, in process enumeration order.
    """
    env = env or BareEnvironment()

    for pid in env.pids():
        result = scan_process(env, pid, target_identity, target_pid, target_fd)
        if result.status is ScanStatus.MATCH_FOUND:
            _LOG.debug("peer %d holds %s on %s", pid, target_identity, result.match.path)
            yield result.match

def peers_of(target_pid, target_fd, env=None):
    env = env or BareEnvironment()
    target_identity = resolve_target(target_pid, target_fd, env=env)
    if target_identity is None:
        return [ ]
    return list(find_peers(target_identity, target_pid, target_fd, env=env))

def run(target_fd, target_pid, options, env=None, out=None):
    env = env or BareEnvironment()
    out = out or sys.stdout

    target_identity = resolve_target(target_pid, target_fd, env=env)
    if target_identity is None:
        return EX_OK

    for match in find_peers(target_identity, target_pid, target_fd, env=env):
        if options.verbose:
            print(f"Path: {match.path}", file=out)
        print(match.pid, file=out)

    return EX_OK
