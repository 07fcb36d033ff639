# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="markup-a11y",
    version="0.1.0",
    description="Semantic resolution and tree traversal engine for accessibility linting of JSX-like markup",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["markup_a11y", "markup_a11y.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
