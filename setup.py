from setuptools import setup, find_packages

setup(
    name="capscraper",
    version="1.0.0",
    packages=find_packages(include=["capscraper", "capscraper.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24",
        "beautifulsoup4>=4.11",
        "lxml>=4.9",
        "numpy>=1.21.0",
        "pandas>=1.5.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "capscraper=capscraper.cli:main",
        ],
    },
    author="Jayden Polansky",
    description="NFL team salary cap scraper (Spotrac, 2011-2024) with CSV export",
)
