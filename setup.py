from setuptools import setup

with open("requirements.txt", "r") as f:
    requirements = f.read().splitlines()

with open("hashset/version.py", "r") as f:
    exec(f.read(), globals())

setup(
    name = "hashset",
    description = "a generic unordered set with early-exit enumeration",
    version = __version__,
    packages = [
        "hashset",
        "hashset.cli",
    ],
    entry_points = {
        "console_scripts": [
            "hashset-setops=hashset.cli.setops:main",
        ]
    },
    package_data = {
        "hashset": ["py.typed"]
    },
    python_requires = ">=3.10",
    install_requires = requirements,
    extras_require = {
        "test": ["pytest"]
    }
)
