# setup.py
from setuptools import setup, find_packages

setup(
    name="github-llm",
    version="0.1.0",
    description="A command-line client for the GitHub Models chat-completion API.",
    author="github-llm contributors",
    packages=find_packages(include=['github_llm', 'github_llm.*']),
    include_package_data=True,
    package_data={
        'github_llm': ['data/*.yaml', 'templates/*.j2'],
    },
    install_requires=[
        "click>=8.0",
        "pyyaml",
        "jinja2",
        "rich",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'github-llm = github_llm.cli:cli',
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
