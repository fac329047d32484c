from setuptools import setup, find_packages

setup(
    name='wp-version-updater',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    version='1.0.0',
    description='A tool to update WordPress plugin versions',
    keywords=['wordpress', 'woocommerce', 'plugin', 'version', 'release', 'automation'],
    classifiers=['Development Status :: 3 - Alpha',
                 'Intended Audience :: Developers',
                 'Environment :: Console',
                 'Topic :: Software Development :: Build Tools',
                 'Programming Language :: Python :: 3'],
    python_requires='>=3.10',
    install_requires=['requests', 'docopt', 'rich'],
    extras_require={
        'test': ['pytest', 'pytest-httpserver'],
    },
    entry_points={
        "console_scripts": ['wp-version-updater = wp_version_updater.wp_version_updater:run_wp_version_updater']
    }
)
