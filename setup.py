
from setuptools import setup, find_packages

setup(
    name='Dromedary',
    version='0.1',
    description='Rendering dictionary entries of search results as HTML',
    author='Thomas Vogt',
    author_email='thomas.vogt@tovotu.de',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords='dictionary xslt search highlighting',
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=[
        "lxml",
        "pyquery",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["dromedary-render=dromedary.cli.main:cli_main"],
    },
)
