from setuptools import setup, find_packages
setup(
    name="shader_blob",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["xxhash"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["shader-blob=shader_blob.cli:main"]},
    python_requires=">=3.9",
)
