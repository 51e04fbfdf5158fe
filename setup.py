from setuptools import setup, find_packages

setup(
    name="pocketrag",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "ollama",
        "httpx",
        "numpy",
        "openai",
        "pydantic>=2",
        "pyyaml",
        "click",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "pocketrag=pocketrag.cli.commands:cli",
        ],
    },
    python_requires=">=3.9",
)
