from setuptools import setup, find_packages

setup(
    name="trajan",
    version="0.1.0",
    description="Uniform access to molecular dynamics trajectories with a streaming XYZ reader and writer",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
        "pyyaml",
        "tqdm"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'trajan=trajan.cli:main',
        ],
    },
    python_requires=">=3.8",
)
