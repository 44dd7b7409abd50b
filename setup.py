import codecs
import os
import re
import setuptools


here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    # intentionally *not* adding an encoding option to open, See:
    #   https://github.com/pypa/virtualenv/issues/201#issuecomment-3145690
    with codecs.open(os.path.join(here, *parts), 'r') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setuptools.setup(
    name='mbcircle',
    version=find_version('src/mbcircle', '__init__.py'),
    author="Thomas Zamojski",
    author_email="thomas.zamojski@datastorm.fr",
    packages=['mbcircle'],
    package_dir={'mbcircle': 'src/mbcircle'},
    license='GPL-3.0',
    description="Minimum bounding circles of planar geometries.",
    long_description=read('README'),
    python_requires='>=3.8',
    install_requires=[
        "numpy >= 1.20",
        "pandas >= 1.0",
        "shapely >= 2.0",
        "toolz >= 0.7.4",
    ],
    extras_require={
        'test': ["pytest"],
    },
)
