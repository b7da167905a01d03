import os
import re

class Environment:
	PIPE_PATTERN = re.compile(r"^pipe:")
	PID_PATTERN = re.compile(r"^[1-9][0-9]*$")

	proc_root = "/proc"

	def start(self):
		raise NotImplementedError()

	def stop(self):
		raise NotImplementedError()

	def check(self):
		raise NotImplementedError()

	def listdir(self, path):
		raise NotImplementedError()

	def isdir(self, path):
		raise NotImplementedError()

	def islink(self, path):
		raise NotImplementedError()

	def readlink(self, path):
		raise NotImplementedError()

	#
	# Canned functionality
	#

	def __enter__(self):
		self.start()
		return self

	def __exit__(self, exc_type, value, tb):
		self.stop()

	def readable(self, path): #pylint:disable=unused-argument
		return True

	def is_pipe(self, target):
		return bool(self.PIPE_PATTERN.match(target))

	def process_path(self, pid):
		return os.path.join(self.proc_root, str(pid))

	def fd_dir(self, pid):
		return os.path.join(self.process_path(pid), "fd")

	def fd_path(self, pid, fd):
		return os.path.join(self.fd_dir(pid), str(fd))

	def pids(self):
		"""
		Yields the visible process IDs in ascending order.
		"""
		names = [ n for n in self.listdir(self.proc_root) if self.PID_PATTERN.match(n) ]
		for pid in sorted(int(n) for n in names):
			if self.isdir(self.process_path(pid)):
				yield pid

	def descriptors(self, pid):
		"""
		Returns the descriptor numbers open in a process, in ascending order.
		Raises OSError when the descriptor table cannot be listed.
		"""
		return sorted(int(n) for n in self.listdir(self.fd_dir(pid)) if n.isdigit())
