# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="modelexplorer",
    version="1.0.0",
    description="Expand-all computation for model explorer trees and view to diagram style conversion",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["modelexplorer*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'modelexplorer=modelexplorer.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
