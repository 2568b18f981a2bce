from setuptools import setup, find_packages

setup(
    name="colordinate",
    version="0.1.0",
    description="Edit editor highlight groups as a YAML document",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx",
        "rich",
        "prompt-toolkit",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "colordinate=colordinate.cli:main",
        ],
    },
    python_requires=">=3.11",
)
