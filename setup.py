import setuptools
import os


with open("README.rst", "r", encoding="utf-8") as f:
    long_description = f.read()


with open(os.path.join("solar_modulation", "version.py")) as f:
    txt = f.read()
    last_line = txt.splitlines()[-1]
    version_string = last_line.split()[-1]
    version = version_string.strip("\"'")


setuptools.setup(
    name="solar_modulation",
    version=version,
    description="Force-field solar modulation of cosmic-ray spectra "
    "and comparison plots against AMS-02 reference data",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=[
        "solar_modulation",
    ],
    package_data={
        "solar_modulation": [
            os.path.join("resources", "*"),
        ],
    },
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "astropy",
        "matplotlib",
        "json_line_logger>=0.0.3",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Natural Language :: English",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Physics",
        "Topic :: Scientific/Engineering :: Astronomy",
    ],
)
