from setuptools import setup, find_packages


setup(name='robomath',
      version='1.0.0',
      description='Quaternion and unit quaternion value types with angle wrapping utilities',
      packages=find_packages(include=['robomath', 'robomath.*']),
      python_requires='>=3.11',
      install_requires=['numpy>=2'],
      extras_require={'test': ['pytest']})
