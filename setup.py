from setuptools import find_packages
from setuptools import setup

setup(
    name="tinyemitter",
    version="0.1.0",
    description="Small synchronous event emitter modelled on the Node.js EventEmitter",
    author="Joel Squire",
    author_email="joel@squire.org",
    packages=find_packages(include=["tinyemitter", "tinyemitter.*"]),
    install_requires=[
        "typing_extensions>=4.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=0.940",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
