"""Setup script for the terminal date picker package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, splitting test tooling into the dev extra
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().strip().split("\n"):
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        if "pytest" in line:
            dev_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="termdatepicker",
    version="1.0.0",
    description="Embeddable month-calendar date picker for terminal applications",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="termdatepicker developers",
    # Package configuration
    packages=find_packages(exclude=["tests*", "docs*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: User Interfaces",
        "Topic :: Terminals",
        "Framework :: AsyncIO",
    ],
    keywords="calendar date-picker terminal tui widget",
    # Entry points
    entry_points={
        "console_scripts": [
            "termdatepicker=termdatepicker.__main__:main",
        ],
    },
    package_data={
        "termdatepicker": ["py.typed"],
    },
    zip_safe=False,
    platforms=["linux", "macos"],
)
