from setuptools import find_packages, setup


setup(
    name="concacti",
    version="0.3.0",
    description="Concatenate the files of a directory tree into one output file",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["pathspec>=0.10,<1.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["concacti=concacti.cli:main"]},
)
