import os
from setuptools import setup, find_packages
from secretrender import __version__


here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'README.rst')) as f:
    README = f.read()

requires = ['boto3', 'jinja2>=3.0', 'attrs']
tests_require = ['pytest', 'moto[secretsmanager]>=5.0', 'flake8']


setup(name='secret-render',
      version=__version__,
      packages=find_packages(),
      include_package_data=True,
      description='Renders templates with variables from AWS Secrets Manager',
      long_description=README,
      zip_safe=False,
      license='APLv2.0',
      classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
      ],
      python_requires='>=3.8',
      install_requires=requires,
      extras_require={'test': tests_require},
      entry_points="""
      [console_scripts]
      secret-render = secretrender.main:main
      """)
