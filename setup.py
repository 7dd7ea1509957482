from setuptools import setup, find_packages

setup(
    name="copepod",
    version="0.0.1",
    packages=find_packages(exclude=["tests"]),
    package_data={
        'copepod': ['fields.csv'],
    },
    install_requires=[
        "pandas",
        "numpy",
        "pyyaml",
    ],
    extras_require={
        'test': ['pytest'],
    },
)
