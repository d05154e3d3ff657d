import pathlib
import re
import sys

import setuptools

root_dir = pathlib.Path(__file__).parent

description = "Strict URI parser for untrusted input"

long_description = (root_dir / "README.rst").read_text(encoding="utf-8")

# PyPI disables the "raw" directive.
long_description = re.sub(
    r"^\.\. raw:: html.*?^(?=\w)",
    "",
    long_description,
    flags=re.DOTALL | re.MULTILINE,
)

# Set tag and version.
exec((root_dir / "src" / "uriparts" / "version.py").read_text(encoding="utf-8"))

packages = ["uriparts"]

if sys.version_info[:3] < (3, 8, 0):
    raise Exception("uriparts requires Python >= 3.8.")

setuptools.setup(
    name="uriparts",
    version=version,  # noqa: F821
    description=description,
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
    ],
    package_dir={"": "src"},
    package_data={"uriparts": ["py.typed"]},
    packages=packages,
    extras_require={"fuzzing": ["atheris"]},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
)
