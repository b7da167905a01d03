import os

import pytest

import fdpid

class FakeProc:
    """
    A throwaway process filesystem: /<root>/<pid>/fd/<n> symlinks whose
    targets mimic what the kernel reports.
    """

    def __init__(self, root):
        self.root = str(root)
        os.makedirs(os.path.join(self.root, "self", "fd"))
        self.unreadable = set()

    def process(self, pid, fds=None):
        fd_dir = os.path.join(self.root, str(pid), "fd")
        os.makedirs(fd_dir, exist_ok=True)
        for fd, target in (fds or { }).items():
            os.symlink(target, os.path.join(fd_dir, str(fd)))
            # kernel objects such as pipe:[n] get a file to resolve to
            obj = os.path.join(fd_dir, target)
            if not os.path.isabs(target) and not os.path.exists(obj):
                open(obj, "w").close()
        return pid

    def fd_path(self, pid, fd):
        return os.path.join(self.root, str(pid), "fd", str(fd))

    def environment(self):
        return FakeEnvironment(self)

class FakeEnvironment(fdpid.BareEnvironment):
    def __init__(self, fake):
        super().__init__(proc_root=fake.root)
        self.fake = fake

    def readable(self, path):
        return path not in self.fake.unreadable and super().readable(path)

@pytest.fixture
def fake_proc(tmp_path):
    return FakeProc(tmp_path / "proc")

@pytest.fixture
def env(fake_proc):
    return fake_proc.environment()
