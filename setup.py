from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "tqdm>=4.65.0",
    "typer>=0.9.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="gntparse",
    version="0.1.0",
    packages=find_packages(include=["gntparse", "gntparse.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "gntparse=gntparse.cli.main:app",
        ],
    },
    python_requires=">=3.9",
    description="Decoder for SBL MorphGNT morphology tags",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
