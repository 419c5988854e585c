from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="lazyviews",
    version=version,
    description="Composable lazy views (take, map, concat) over sequences",
    long_description=long_description,
    keywords=['view', 'lazy', 'iterator', 'sequence', 'range', 'adaptor'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.6",
    extras_require={
        'numpy support': [
            'numpy'],
        'documentation': [
            'sphinx'],
        'tests': [
            'pytest', 'numpy', 'coverage']
    }
)
