import os

EX_OK = os.EX_OK
EX_ERROR = 1
EX_USAGE = os.EX_USAGE
EX_UNKNOWN = os.EX_UNAVAILABLE
EX_SOFTWARE = os.EX_SOFTWARE

class FdpidError(Exception):
    exit_code = EX_ERROR

class UsageError(FdpidError):
    exit_code = EX_USAGE

class EnvironmentUnavailable(FdpidError):
    """
    The process/descriptor introspection facility is missing or unusable.
    """
    exit_code = EX_UNKNOWN

class TargetNotFound(FdpidError):
    exit_code = EX_ERROR

class ProcessNotFound(TargetNotFound):
    def __init__(self, pid):
        super().__init__(f"No such process ID: {pid}")
        self.pid = pid

class DescriptorNotFound(TargetNotFound):
    def __init__(self, pid, fd):
        super().__init__(f"No such file descriptor for process ID {pid}: {fd}")
        self.pid = pid
        self.fd = fd
