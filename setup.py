from setuptools import setup, find_packages


setup(name='python-typedfish',
      version='1.0.0',
      description='Typed Redfish client bindings with read-modify-write updates',
      author = 'Hewlett Packard Enterprise',
      classifiers=[
          'Development Status :: 3 - Alpha',
          'License :: OSI Approved :: Apache Software License',
          'Programming Language :: Python :: 3',
          'Topic :: Communications'
      ],
      keywords='Redfish DMTF',
      packages=find_packages('src'),
      package_dir={'': 'src'},
      python_requires='>=3.6',
      install_requires=[
          'jsonpatch',
          'jsonpath_rw',
          'jsonpointer'
      ],
      extras_require={
          'test': ['pytest']
      })
