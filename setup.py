import sys
from setuptools import setup


if sys.version_info[:2] < (3, 6):
    raise SystemExit('require Python3.6+')


setup(
    name='fieldscan',
    version='0.0.1.dev0',
    packages=['fieldscan'],
    install_requires=['structlog'],
    extras_require={
        'ci': ['pytest', 'pytest-cov'],
    },
    entry_points={
        'console_scripts': ['fieldscan=fieldscan.__main__:main'],
    },
    python_requires='>=3.6',
    license='MIT',
    description='Extract named fields from strings with scanf-like templates.',
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',
        'Topic :: Text Processing',

        'License :: OSI Approved :: MIT License',

        'Operating System :: OS Independent',

        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='scanf template parsing text extraction',
)
