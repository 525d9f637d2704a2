from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="Dead link checker for markdown documentation trees",
    packages=find_packages(include=["doclinks", "doclinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "aiohttp",  # HEAD probe fallback
        "selenium>=4.10",  # Rendered navigation (Chrome contexts)
        "pydantic>=2",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pygments",  # Output highlighting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
