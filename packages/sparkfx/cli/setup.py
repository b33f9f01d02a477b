from setuptools import find_namespace_packages, setup

# Physical structure matches import path: packages/sparkfx/cli -> sparkfx.cli
packages = find_namespace_packages(where="../..", include=["sparkfx.cli", "sparkfx.cli.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
