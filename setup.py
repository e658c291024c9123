from setuptools import setup, find_packages
import os

def readme():
    with open("README.md") as f:
        return f.read()

here = os.path.dirname(os.path.abspath(__file__))
version_ns = {}
with open(os.path.join(here, 'plotcmap', '_version.py')) as f:
    exec (f.read(), {}, version_ns)

_all_deps = [
    "colorcet",
]

_dev_deps = _all_deps + [
    "pytest",
    "pytest-mock",
]

setup(
    name="plotcmap",
    version=version_ns["__version__"],
    description="Colormapped 2D and 3D lines with Matplotlib",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
    keywords="plot plotting colormap line matplotlib",
    license="BSD License",
    packages=find_packages(exclude=("tests", )),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        "packaging",
        "appdirs>=1.4.4",
        "numpy>=1.21.1",
        "sympy>=1.10.1",
        "matplotlib>3.4.2",
        "mergedeep>=1.3.4",
        "param>=2.0.0",
        "Pillow",
    ],
    extras_require={
        "all": _all_deps,
        "dev": _dev_deps,
    }
)
