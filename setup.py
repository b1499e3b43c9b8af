#!/usr/bin/env python3

from setuptools import setup

setup(
    name="audiotag",
    version="0.1.0",
    packages=["audiotag"],
    entry_points = {
        'console_scripts': ['audiotag = audiotag.commandline:main']
    },
    python_requires=">=3.6",
    license="BSD",
    description="Interactive in-place ID3v1/ID3v2 tag editor in pure Python 3",
    long_description="""
Audiotag edits the ID3v1 trailer or the ID3v2 header of an MP3 file in
place.  ID3v2 frames are walked one at a time; each can be kept,
replaced or removed, and the file is spliced on disk without loading
it into memory.  Missing title, artist, album, year, track and composer
fields can be added at the end of the pass.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
