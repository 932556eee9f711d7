from setuptools import setup, find_packages

setup(
    name="datecue",
    version="0.1.0",
    description="Extract natural language date and time references from short text",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "datecue=datecue.cli:main",
        ],
    },
    python_requires=">=3.8",
)
