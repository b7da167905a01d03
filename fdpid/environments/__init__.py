from .env import Environment
from .bare_env import BareEnvironment
from .docker_env import DockerEnvironment
