from setuptools import find_packages, setup

setup(
    name="feedly-cloud",
    version="0.1.0",
    packages=find_packages(include=["feedly_cloud", "feedly_cloud.*"]),
    python_requires=">=3.8",
    description="Typed client for the Feedly Cloud API",
    install_requires=[
        "pyyaml>=6.0",
        "requests>=2.28",
        "urllib3>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "responses>=0.23",
        ],
    },
)
