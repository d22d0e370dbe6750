from setuptools import setup, find_packages

def read_requirements(filename: str) -> list[str]:
    with open(filename, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name="largest-differencing-method",
    version="0.0.1",
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    package_data={"ldm": ["config/*.yaml"]},
    install_requires=read_requirements('requirements.txt'),
    extras_require={"test": ["pytest"]},
    python_requires='>=3.10',
    description="Two-way number partitioning with the Karmarkar-Karp largest differencing method",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown"
)
