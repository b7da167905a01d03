import os

from ..errors import EnvironmentUnavailable
from .env import Environment

def is_open(fd):
	try:
		os.fstat(fd)
	except OSError:
		return False
	return True

class BareEnvironment(Environment):
	def __init__(self, proc_root="/proc"):
		self.proc_root = proc_root

	def start(self):
		pass

	def stop(self):
		pass

	def check(self):
		if not os.path.isdir(self.proc_root):
			raise EnvironmentUnavailable(f"No process filesystem mounted at {self.proc_root}")
		if not os.path.isdir(os.path.join(self.proc_root, "self", "fd")):
			raise EnvironmentUnavailable(f"{self.proc_root} does not expose per-process descriptor tables")

	def listdir(self, path):
		return os.listdir(path)

	def isdir(self, path):
		return os.path.isdir(path)

	def islink(self, path):
		return os.path.islink(path)

	def readlink(self, path):
		return os.readlink(path)

	def readable(self, path):
		# follows the link: the open mode of the descriptor does not matter
		return os.access(path, os.R_OK)

	def is_self(self, pid):
		if pid != os.getpid():
			return False
		try:
			return os.path.samefile(self.process_path(pid), os.path.join(self.proc_root, "self"))
		except OSError:
			return False

	def descriptors(self, pid):
		fds = super().descriptors(pid)
		if self.is_self(pid):
			# the listing held a descriptor of its own while it ran
			fds = [ fd for fd in fds if is_open(fd) ]
		return fds
