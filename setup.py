from setuptools import setup, find_packages

setup(
    name="cluster-template-functions",
    version="0.3.0",
    packages=find_packages(include=["clusterfuncs", "clusterfuncs.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "jinja2>=3.1",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "clusterfuncs=clusterfuncs.cli:main",
        ],
    },
)
