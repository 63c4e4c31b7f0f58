"""
Installation setup for xivcollections
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("xivcollections/resources/xivcollections.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """Use the requirements file, if able"""
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []
    return [
        line.strip()
        for line in requirements_file.open(encoding="utf-8").readlines()
        if line.strip() and not line.startswith("#")
    ]


setuptools.setup(
    name="xivcollections",
    version=config.get("XIVCOLLECTIONS", "version", fallback="1.0.0+fallback"),
    description="Collectible catalogs built from FINAL FANTASY XIV sheet data",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
    ],
    keywords=[
        "Collectibles",
        "FFXIV",
        "Game Data",
    ],
    python_requires=">=3.10",
    packages=setuptools.find_packages(include=["xivcollections", "xivcollections.*"]),
    package_data={"xivcollections": ["resources/*"]},
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
)
