from setuptools import setup, find_packages

setup(
    name="partialfrac",
    version="1.0",
    description="Partial fraction decomposition of rational functions by linear algebra",
    long_description=("Partial fraction decomposition of rational functions given as a numerator polynomial and a "
                      "list of denominator factors. Candidate fractions are enumerated from factor combinations and "
                      "their coefficients are found by Gauss-Jordan elimination in floating point arithmetic."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["partialfrac", "partialfrac.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["partial fractions", "rational functions", "polynomials", "gauss-jordan elimination"],
    zip_safe=False,
)
