from setuptools import setup, find_packages

setup(
    name="getnews",
    version="2.0.0",
    description="Terminal news tables for the News API — wrapped, bordered, optionally colored",
    author="getnews.tech contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dateutil>=2.8.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "getnews=getnews.cli:main",
        ],
    },
    python_requires=">=3.9",
)
