import setuptools

setuptools.setup(
    name="microlibm",
    version="1.0.0",
    author="Kalray",
    description="binary32 logarithm and binary32/binary64 power functions with mpmath based accuracy checks",
    packages=setuptools.find_packages(exclude=["*.tests", "*.unit_tests"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "numpy",
        "mpmath",
    ],
    extras_require={
        "sollya": ["sollya @ git+https://gitlab.com/metalibm-dev/pythonsollya"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "microlibm-check=microlibm_functions.accuracy:main",
        ],
    },
    python_requires='>=3.7',
)
