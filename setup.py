#!/usr/bin/env python3
"""
twba-config - Twitch → YouTube 백업 파이프라인 설정 로더
Setup script for package installation
"""

from setuptools import setup, find_packages

# Read README file for long description
def read_file(filename):
    """Read file contents."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""

# Read requirements from requirements.txt
def read_requirements():
    """Read requirements from requirements.txt."""
    requirements = []
    try:
        with open('requirements.txt', 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    requirements.append(line)
    except FileNotFoundError:
        pass
    return requirements

setup(
    name="twba-config",
    version="0.3.0",
    description="Twitch → YouTube 백업 파이프라인 설정 로더 (환경변수 / JSON 파일)",
    long_description=read_file("README.md") or "twba-config - configuration loader for the Twitch backup pipeline",
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="twitch, youtube, backup, config",
)
