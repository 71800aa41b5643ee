from setuptools import setup, find_packages

setup(
    name="vanessa-automation-mcp",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "mcp>=1.0.0,<2",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "vanessa-mcp-server=vanessa_mcp.server:main"
        ]
    },
    python_requires=">=3.10",
)
