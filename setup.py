from setuptools import setup, find_packages

setup(name="sidereal", packages=find_packages(exclude=['tests', 'tests.*']),
      # command-line entry points.
      entry_points={'console_scripts': ['jd2lst=sidereal.scripts.jd2lst:main']},
      version='0.1',
      install_requires=['numpy', 'astropy', 'pyyaml'],
      extras_require={'test': ['pytest']},
      package_data={'sidereal': ['resources/*.yml']},
      include_package_data=True
      )
