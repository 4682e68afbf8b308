from setuptools import setup, find_packages

setup(
    name="xpath_search",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="XPath query construction and result collection for a CMS search service",
)
