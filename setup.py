"""Setup configuration for shippy"""

from setuptools import setup, find_packages

setup(
    name="shippy",
    version="0.1.0",
    description=(
        "CLI tool that lists the GitLab merge requests merged since the "
        "latest numbered release tag."
    ),
    author="shippy Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
        "GitPython>=3.1.30",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "shippy=shippy.main:main",
        ],
    },
)
