from setuptools import setup, find_packages
setup(
    name="strfile_reader",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy"],
    package_data={"strfile_reader": ["examples/*.py"]},
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
)
