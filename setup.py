from setuptools import find_packages, setup

setup(
    name="dots",
    version="0.1.0",
    description="macOS dotfiles bootstrapper - Homebrew, symlinks, editor and system preferences",
    packages=find_packages(include=["dots", "dots.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "dots=dots.cli:main",
        ],
    },
)
