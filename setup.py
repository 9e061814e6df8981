import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='cdix',
    version='0.1.0',
    description='Decoder for CdIx RIFF containers of build and debug metadata.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"cdix.kernel": ["*.pyi"]},
    install_requires=[
        'deal',
        'parse',
        'PyYAML',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['cdix=cdix.runner:app'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Build Tools',
        'Topic :: Software Development :: Debuggers',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='riff chunk fourcc parse index symbols debug build metadata cdix'
)
