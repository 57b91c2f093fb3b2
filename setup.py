"""Setup configuration for formguard package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = (
    readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""
)

setup(
    name="formguard",
    version="0.1.0",
    description=(
        "Validation and change coordination for the fields of a form, "
        "with Textual and prompt_toolkit bindings"
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Tony Sebion",
    url="https://github.com/tonysebion/formguard",
    packages=find_packages(include=["formguard", "formguard.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "textual>=0.47.0",  # ValidatedInput / FormScope widgets and the demo app
        "prompt_toolkit>=3.0.0",  # BufferField binding
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.990",
        ],
    },
    entry_points={
        "console_scripts": [
            "formguard-demo=formguard.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: User Interfaces",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="forms validation tui textual prompt-toolkit",
)
