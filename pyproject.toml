[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "level2"
version = "1.0.0"
description = "Thread-safe logger and building blocks for network listeners: HTTP/1.1 request and response handling and a threaded TCP server"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "http", "listener", "tcp", "server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: System :: Logging",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
level2 = "level2.main:main"

[tool.hatch.build.targets.wheel]
packages = ["level2"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
