import os

from setuptools import find_packages, setup

setup(
    name="trailcheck",
    version="0.1.0",
    packages=find_packages(include=["trailcheck", "trailcheck.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    author="trailcheck Contributors",
    description="Composable structural validators with path-annotated errors",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
