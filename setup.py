# coding: utf-8
from setuptools import find_packages, setup


with open('README.md', encoding='utf8') as file:
    long_description = file.read()

setup(
    name='xmlmap',
    version='1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    license='MIT',
    description='XML to flattened-path and nested map converter for template helpers',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'httpx',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyyaml',
            'xmltodict',
        ],
    },
)
