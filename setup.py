import os.path

from setuptools import setup

VERSION = "0.1.0"

version_path = os.path.join(os.path.dirname(__file__), 'cvdemosaic', '_version.py')
if not os.path.exists(version_path):
    with open(version_path, "w") as version_file:
        pass
with open(version_path, "r+") as version_file:
    version_content = "__version__ = %r\n" % (VERSION,)
    if version_file.read() != version_content:
        version_file.seek(0)
        version_file.write(version_content)
        version_file.flush()
        version_file.truncate()

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as readme_file:
    readme = readme_file.read()

with open(os.path.join(os.path.dirname(__file__), 'requirements.txt')) as requirements_file:
    requirements = list(filter(bool, [ r.strip() for r in requirements_file ]))

packages = [
    "cvdemosaic",
    "cvdemosaic.util",
    "cvdemosaic.rops",
    "cvdemosaic.rops.colorspace",
    "cvdemosaic.rops.denoise",
]


setup(
    name = "cvdemosaic",
    version = VERSION,
    description = "CFA demosaicing and Bayer-space image tools",
    long_description = readme,
    license = "LGPLv3",
    packages = packages,

    python_requires = '>=3.8',
    install_requires = requirements,
    extras_require = {
        'test': ['pytest'],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Image Processing",
        "Operating System :: OS Independent",
    ],
)
