from setuptools import find_packages, setup

package_name = "mazepath"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        exclude=["tests", "tests.*"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    zip_safe=True,
    description="Seeded grid maze generation and A* shortest path search",
    license="MIT",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["mazepath=mazepath.mapgen.main:app"],
    },
)
