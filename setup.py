from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="rangeview",
    version=version,
    description="Windows over sequence ranges with negative (from the end) bounds",
    url="https://github.com/nlgranger/rangeview",
    long_description=long_description,
    author="Nicolas Granger",
    author_email="nicolas.granger.m@gmail.com",
    keywords=['slice', 'range', 'negative index', 'view', 'sequence'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'numpy support': [
            'numpy'],
        'documentation': [
            'sphinx'],
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
