[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpd"
version = "0.1.0"
description = "Core logic for a chat leveling bot: XP levels, message templates, role rewards and rank card settings"
requires-python = ">=3.11"
dependencies = []
keywords = ["leveling", "xp", "chat", "bot", "templates", "rank-card"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xpd"]

[tool.pytest.ini_options]
addopts = "-ra"
