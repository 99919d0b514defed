"""
Setuptools build script for the interface_contracts runtime contract library.

This setup.py file provides:
- Package metadata for the ``interface-contracts`` distribution
- Runtime dependencies read from requirements.txt with a built-in fallback
- Optional dependency groups for testing and development workflows

The version is read from ``interface_contracts/__init__.py`` without importing
the package, so the build does not need the runtime dependencies installed.
"""

import pathlib  # >=3.10 - Path handling for README and requirements files
import re  # >=3.10 - Version extraction from the package initializer

import setuptools  # >=61.0.0 - setup() and package discovery

HERE = pathlib.Path(__file__).parent
PACKAGE_DIR = HERE / 'interface_contracts'
README_PATH = HERE / 'README.md'
REQUIREMENTS_PATH = HERE / 'requirements.txt'
DEV_REQUIREMENTS_PATH = HERE / 'requirements-dev.txt'

PACKAGE_NAME = 'interface-contracts'
AUTHOR = 'interface_contracts Development Team'
AUTHOR_EMAIL = 'interface-contracts@example.com'
DESCRIPTION = 'Runtime interface contracts with arity and argument type checks for duck-typed Python code'
LICENSE = 'MIT'
URL = 'https://github.com/interface-contracts/interface_contracts'

KEYWORDS = [
    'interface', 'contract', 'runtime checking', 'duck typing', 'design by contract'
]

CLASSIFIERS = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'Topic :: Software Development :: Libraries :: Python Modules',
    'License :: OSI Approved :: MIT License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
]

FALLBACK_REQUIREMENTS = [
    'pydantic>=2.0.0',
    'loguru>=0.7.0',
]

TEST_REQUIREMENTS = [
    'pytest>=8.0.0',
    'pytest-cov>=4.0.0',
    'hypothesis>=6.0.0',
]


def read_requirements(requirements_file: pathlib.Path) -> list:
    """
    Reads and parses requirements from a requirements file, skipping comments
    and blank lines. Returns an empty list when the file does not exist.

    Args:
        requirements_file (pathlib.Path): Path to requirements file for dependency parsing

    Returns:
        list: Requirement strings suitable for install_requires
    """
    if not requirements_file.exists():
        return []

    requirements = []
    for line in requirements_file.read_text(encoding='utf-8').splitlines():
        line = line.split('#')[0].strip()
        if line:
            requirements.append(line)
    return requirements


def read_long_description() -> str:
    if README_PATH.exists():
        return README_PATH.read_text(encoding='utf-8')
    return DESCRIPTION


def get_version_from_package() -> str:
    """
    Extracts ``__version__`` from the package initializer without importing it.

    Returns:
        str: Package version string

    Raises:
        RuntimeError: If no version assignment is found
    """
    init_text = (PACKAGE_DIR / '__init__.py').read_text(encoding='utf-8')
    match = re.search(r'^__version__\s*=\s*[\'"]([^\'"]+)[\'"]', init_text, re.MULTILINE)
    if not match:
        raise RuntimeError('Unable to find __version__ in interface_contracts/__init__.py')
    return match.group(1)


def setup_package():
    """
    Configures and executes setuptools.setup() with package metadata,
    dependencies and optional dependency groups.
    """
    version = get_version_from_package()

    install_requires = read_requirements(REQUIREMENTS_PATH) or FALLBACK_REQUIREMENTS
    dev_requirements = read_requirements(DEV_REQUIREMENTS_PATH) or TEST_REQUIREMENTS + [
        'black>=24.0.0',
        'flake8>=7.0.0',
    ]

    setup_config = {
        'name': PACKAGE_NAME,
        'version': version,
        'description': DESCRIPTION,
        'long_description': read_long_description(),
        'long_description_content_type': 'text/markdown',
        'author': AUTHOR,
        'author_email': AUTHOR_EMAIL,
        'url': URL,
        'license': LICENSE,
        'keywords': KEYWORDS,
        'classifiers': CLASSIFIERS,

        'packages': setuptools.find_packages(include=['interface_contracts', 'interface_contracts.*']),

        'install_requires': install_requires,

        'extras_require': {
            'dev': dev_requirements,
            'test': TEST_REQUIREMENTS,
        },

        'python_requires': '>=3.10',
        'zip_safe': False,
        'include_package_data': True,
    }

    setuptools.setup(**setup_config)


if __name__ == '__main__':
    setup_package()
