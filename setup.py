#!/usr/bin/env python

import os.path

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

try:
    README = open(os.path.join(here, "README.md")).read()
    CHANGES = open(os.path.join(here, "CHANGES.md")).read()
except Exception:
    README = CHANGES = ""


setup(name='QName',
      version='1.0.0',
      description='XML qualified name validation with build-time literal checking',
      long_description=README + "\n\n" + CHANGES,
      long_description_content_type="text/markdown",
      classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: Text Processing :: Markup :: XML'
      ],
      packages=['qname'],
      python_requires='>=3.9',
      install_requires=['click'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': [
              'qname-check = qname.cmdline:check',
              'qname-parse = qname.cmdline:parse',
          ],
      },
     )
