from setuptools import setup, find_packages

setup(
    name="zkcontains",
    version="0.1.0",
    description="A package to prove substring containment and set membership with arithmetic circuits",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=["tx-engine>=0.13"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
