from setuptools import setup, find_packages

setup(
    name="filepick",
    version="0.1.0",
    description="Pick a random tracked file and scroll the terminal onto it",
    packages=find_packages(include=["filepick", "filepick.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.11",
)
