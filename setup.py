from setuptools import setup, find_packages
import os


def get_version():
    """
    Gets the version number. Pulls it from the source files rather than
    duplicating it.
    """
    fn = os.path.join(os.path.dirname(__file__), 'src', 'ptri', '__init__.py')
    try:
        with open(fn, 'r') as fh:
            lines = fh.readlines()
    except IOError:
        raise RuntimeError("Could not determine version number"
                           "(%s not there)" % (fn))
    version = None
    for l in lines:
        # include the ' =' as __version__ might be a part of __all__
        if l.startswith('__version__ =', ):
            version = eval(l[13:])
            break
    if version is None:
        raise RuntimeError("Could not determine version number: "
                           "'__version__ =' string not found")
    return version


PACKAGES = find_packages('src')
REQUIREMENTS = ["geompreds"]
EXTRAS = {"test": ["pytest"]}

setup(
    name = "ptri",
    version = get_version(),
    packages = PACKAGES,
    package_dir = {"": "src"},
    description = "Incremental Delaunay triangulation of point sets, "
                  "in the plane and on the flat torus (pure Python)",
    license = "MIT license",
    zip_safe = False,
    install_requires = REQUIREMENTS,
    extras_require = EXTRAS,
    python_requires = ">=3.6",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
