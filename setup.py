from setuptools import setup, find_namespace_packages

setup(
    name="library_catalog",
    version="1.0.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "Click",
        "fastapi>=0.100",
        "pydantic>=2.5",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "library-catalog=cli.main:main",
        ],
    },
)
