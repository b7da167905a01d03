import logging

import docker
import docker.errors

from ..errors import EnvironmentUnavailable
from .env import Environment

_LOG = logging.getLogger(__name__)

class DockerEnvironment(Environment):
	"""
	Inspects the process filesystem of a running container. Process IDs are
	those of the container's PID namespace.
	"""

	def __init__(self, container, proc_root="/proc"):
		self.container_name = container
		self.container = None
		self.proc_root = proc_root

	def start(self):
		if self.container:
			return

		try:
			client = docker.from_env()
			self.container = client.containers.get(self.container_name)
		except docker.errors.NotFound as e:
			raise EnvironmentUnavailable(f"No such container: {self.container_name}") from e
		except docker.errors.DockerException as e:
			raise EnvironmentUnavailable(f"Cannot reach docker: {e}") from e

		if self.container.status != "running":
			name = self.container_name
			self.container = None
			raise EnvironmentUnavailable(f"Container {name} is not running")

	def stop(self):
		# the container is not ours to kill
		self.container = None

	def exec_run(self, *argv):
		assert self.container is not None, "environment not started"
		ret, output = self.container.exec_run(list(argv), user="root")
		output = (output or b"").decode("latin1")
		_LOG.debug("%s: %s -> %d", self.container_name, " ".join(argv), ret)
		return ret, output

	def _raise_for(self, path, output):
		message = output.strip() or "command failed"
		if "No such file" in message:
			raise FileNotFoundError(2, message, path)
		if "Permission denied" in message:
			raise PermissionError(13, message, path)
		raise OSError(5, message, path)

	def check(self):
		self.start()
		ret, _ = self.exec_run("test", "-d", f"{self.proc_root}/self/fd")
		if ret != 0:
			raise EnvironmentUnavailable(f"Container {self.container_name} has no process filesystem at {self.proc_root}")

	def listdir(self, path):
		ret, output = self.exec_run("ls", "-1", "-A", path)
		if ret != 0:
			self._raise_for(path, output)
		return output.splitlines()

	def isdir(self, path):
		return self.exec_run("test", "-d", path)[0] == 0

	def islink(self, path):
		return self.exec_run("test", "-L", path)[0] == 0

	def readlink(self, path):
		ret, output = self.exec_run("readlink", path)
		if ret != 0:
			self._raise_for(path, output)
		return output.rstrip("\n")
