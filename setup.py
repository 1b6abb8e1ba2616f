from setuptools import setup, find_packages

setup(
    name="whim",
    version="0.1.0",
    description="Markdown document library with a typed command line argument parser.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Evan Overman",
    url="https://an-prata.it",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "whim=whim.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
