import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="elmtoolbox",
    version="0.1.0",
    description="A scikit-learn-compatible toolbox of growing, online "
                "sequential and kernel Extreme Learning Machines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['elmtoolbox', 'elmtoolbox.*']),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    keywords='Extreme Learning Machine, EM-ELM, OS-ELM, Kernel ELM',
    install_requires=[
        'scikit-learn>=1.6',
        'numpy>=1.18.1',
        'scipy>=1.4.0',
        'joblib>=0.13.2',
        'tqdm>=4.33.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.9',
)
