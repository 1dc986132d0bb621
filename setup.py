import os.path

from setuptools import find_packages, setup


def read(fname):
    path = os.path.join(os.path.dirname(__file__), fname)
    with open(path, "r") as rfile:
        return rfile.read()


metadata = {}
exec(read("src/rakuten_ws/__about__.py"), metadata)


setup(
    name="rakuten_ws",
    version=metadata["__version__"],
    description=metadata["__description__"],
    license="MIT",
    long_description=read("README.rst") + "\n\n" + read("HISTORY.rst"),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=["snug>=2.0"],
    extras_require={
        "aiohttp": ["aiohttp>=3.4.4"],
        "requests": ["requests>=2.20"],
        "test": ["pytest", "pytest-mock", "gentools>=1.1"],
    },
    keywords=[
        "api-wrapper",
        "rakuten",
        "rest",
        "http",
        "search",
    ],
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
)
