from setuptools import find_packages, setup

# Single source version handling. Also see https://packaging.python.org/guides/single-sourcing-package-version
__version__ = None
with open("src/ogcapi_dggs/about.py") as fp:
    exec(fp.read())

tests_require = [
    "pytest>=6.2.0",
]

setup(
    name="ogcapi-dggs",
    version=__version__,
    description="OGC API DGGS collection description service.",
    packages=find_packages(where="src", include=["ogcapi_dggs", "ogcapi_dggs.*"]),
    package_dir={"": "src"},
    package_data={"ogcapi_dggs": ["config/examples/*.py", "templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "attrs>=22.2.0",
        "flask>=2.2",
        "gunicorn>=20.0",
        "python-json-logger~=2.0",
    ],
    tests_require=tests_require,
    extras_require={
        "dev": tests_require,
    },
    entry_points={
        "console_scripts": ["ogcapi-dggs=ogcapi_dggs.run:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
    ],
)
