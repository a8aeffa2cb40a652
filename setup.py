from setuptools import setup, find_packages

setup(
    name="media-splitter",
    version="0.1.0",
    description="Split a media timeline into millisecond segments",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "ffmpeg-python",
        "rich>=13.0.0",  # Explicit minimum version
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "media-splitter=media_splitter.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
