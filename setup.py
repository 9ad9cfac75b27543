"""
Setup script for coursepack.

coursepack rebuilds a course curriculum from a flat collection of
content files (as found on an SD card or SPIFFS image):

1. Module grouping - files are bucketed into modules by filename prefix
2. Lesson extraction - ordering key, title and rendered HTML per lesson
3. Quiz parsing - loosely formatted quiz text into question records

The 'coursepack' command is the primary entry point.
"""

from setuptools import find_packages, setup

setup(
    name="coursepack",
    version="1.0.0",
    description="Curriculum loader for flat lesson/quiz content packs",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Rendering
        "markdown>=3.4",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "coursepack=coursepack.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="curriculum lessons quiz markdown parser education",
)
