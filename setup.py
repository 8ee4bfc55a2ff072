"""
Setup script for the keyword decision tree trainer
"""

from setuptools import setup, find_packages

with open("keyword_tree/README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="keyword-tree-trainer",
    version="0.1.0",
    description="Trains compact keyword-frequency decision trees for language identification",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Text Processing :: Linguistic",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "scikit-learn>=1.1",
        "regex>=2021.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.9",
        ],
    },
    include_package_data=True,
    keywords="decision tree, language identification, keyword frequency, classification",
)
