# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="smartcat",
    version="1.0.0",
    description="Concatenate the files of a directory tree in dependency order",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["smartcat", "smartcat.*"]),
    package_data={
        "smartcat.interface": ["locales/*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'smartcat=smartcat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
