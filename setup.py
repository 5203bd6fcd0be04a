from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='ibutsu_client',
    version='0.1.0',
    description='Async client for the Ibutsu test results API',
    python_requires='>=3.8',
    install_requires=requirements,
    package_dir={'': 'src'},
    packages=find_packages('src'),
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
