from setuptools import setup, find_packages

test_req = [
    "pytest>=7.0",
    "pytest-cov>=4.0",
    "responses>=0.23",
    "coverage>=7.0",
    "black",
]

setup(
    name="socialauth-pinterest",
    version="0.1.0",
    description="Pinterest social login provider",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "Flask>=2.2",
        "loguru>=0.6",
        "requests>=2.28",
    ],
    extras_require={"test": test_req},
    zip_safe=False,
)
