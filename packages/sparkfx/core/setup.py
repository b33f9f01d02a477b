from setuptools import find_namespace_packages, setup

# Physical structure matches import path: packages/sparkfx/core -> sparkfx.core
packages = find_namespace_packages(where="../..", include=["sparkfx.core", "sparkfx.core.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
