from setuptools import setup, find_packages

# Read dependencies from requirements.txt
with open("requirements.txt") as f:
    install_requires = [line.strip() for line in f if line.strip() and not line.startswith("#")]

# Read version from version.txt
with open("version.txt") as f:
    version = f.read().strip()

setup(
    name="dtvs",
    version=version,
    packages=["dtvs"] + ["dtvs." + pkg for pkg in find_packages(where="dtvs")],
    package_dir={"dtvs": "dtvs"},
    package_data={
        "dtvs": [
            "input/config/*.yaml",
            "input/specs/DateTime/*/*.json",
        ],
    },
    install_requires=install_requires,
    extras_require={
        "test": ["pytest-html"],
    },
    entry_points={
        "console_scripts": [
            "dtvs=dtvs.main:main",
        ],
    },
    include_package_data=True,
    description="Date-time validation suite running recognizer spec fixtures",
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Text Processing :: Linguistic",
        "Operating System :: OS Independent",
    ],
)
