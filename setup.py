"""Package setup for graph_crawler."""

from setuptools import setup, find_packages

setup(
    name="graph-crawler",
    version="1.0.0",
    description="Bounded breadth-first web crawler that maps pages, links and images into a graph",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graph-crawler=graph_crawler.cli:main",
        ],
    },
)
