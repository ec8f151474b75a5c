from setuptools import setup, find_packages
import re

# Read version from financepro/__init__.py
with open('financepro/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='financepro',
    version=version,
    packages=find_packages(include=['financepro', 'financepro.*']),
    package_data={
        'financepro': ['tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'financepro=financepro.cli.__main__:main',
            'financepro-mcp=financepro.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Personal finance calculations: pay, taxes, budgets and growth.',
    python_requires='>=3.10',
)
