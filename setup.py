from setuptools import setup, find_packages
import os

base_dir = os.path.dirname(__file__)  # Directory of the script
requirements_path = os.path.join(base_dir, 'requirements.txt')

with open(requirements_path) as f:
    required = f.read().splitlines()

setup(name='midpointQuadrature',
      version='0.1',
      description='Sequential midpoint rule benchmark for a singular 1-D integrand',
      license='MIT',
      packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
      install_requires=required,
      extras_require={'test': ['pytest']},
      include_package_data=True,
      zip_safe=False)
