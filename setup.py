"""Setup configuration for scriptbot - scripted conversational assistant"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="scriptbot",
    version="0.1.0",
    author="scriptbot contributors",
    description="scriptbot — scripted conversational assistant with pattern-matched replies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "ddgs>=9.0.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "scriptbot=scriptbot.cli:main",
        ],
    },
)
