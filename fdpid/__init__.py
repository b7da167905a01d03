from .errors import FdpidError, UsageError, EnvironmentUnavailable, TargetNotFound, ProcessNotFound, DescriptorNotFound
from .errors import EX_OK, EX_ERROR, EX_USAGE, EX_UNKNOWN, EX_SOFTWARE
from .environments import Environment, BareEnvironment, DockerEnvironment
from .resolver import Match, ScanStatus, ScanResult, ResolverOptions, resolve_target, scan_process, find_peers, peers_of, run
