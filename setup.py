from setuptools import setup
from setuptools import find_packages

setup(
    name="fdpid",
    version="1.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests"]),
    install_requires=["pwntools", "docker"],
    extras_require={
        "test": ["pytest"],
    },
    description="Print the PID of the processes at the other end of a pipe",
    url="https://github.com/l0b0/pspipe",
    entry_points={
        "console_scripts": [
            "fdpid = fdpid.__main__:main"
        ],
    },
)
