#!/usr/bin/env python3
"""
Setup script for the NEPTHIC E2E suite.

Install with `pip install .` or, for development, `pip install -e '.[dev]'`
followed by `playwright install chromium`.
"""

import sys

if sys.version_info < (3, 11):
    sys.exit("Error: nepthic-e2e requires Python 3.11 or higher.")

try:
    from setuptools import setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Read version from __version__.py for consistency
try:
    import re
    from pathlib import Path

    version_file = Path(__file__).parent / "src" / "nepthic_e2e" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

# Read long description from README if available
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
    long_description_content_type = "text/markdown"
else:
    long_description = "End-to-end browser tests and tooling for the NEPTHIC storefront"
    long_description_content_type = "text/plain"

# Core dependencies
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
    "Faker>=20.0.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "pytest>=7.4.0",
        "pytest-asyncio>=0.24.0",
        "pytest-cov>=4.1.0",
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
    ],
}

setup(
    name="nepthic-e2e",
    version=version,
    description="End-to-end browser tests and tooling for the NEPTHIC storefront",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    author="NEPTHIC QA Team",
    license="MIT",
    python_requires=">=3.11",
    packages=[
        "nepthic_e2e",
        "nepthic_e2e.data",
        "nepthic_e2e.inbox",
        "nepthic_e2e.pages",
    ],
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "nepthic-e2e=nepthic_e2e.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["e2e", "playwright", "testing", "page-objects"],
)
