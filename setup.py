# setup.py
from setuptools import setup, find_packages

setup(
    name="js_sifter",
    version="0.1.0",
    description="Extracts string literals from the live code of a page's external scripts",
    packages=find_packages(include=["js_sifter", "js_sifter.*"]),
    package_data={"js_sifter": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "esprima>=4.0.1",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["js_sifter=js_sifter.cli:cli"],
    },
    python_requires=">=3.11",
)
