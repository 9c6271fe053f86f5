# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, setup

try:
    import numpy as np
except ImportError:
    raise RuntimeError(
        "NumPy is required to build this package. Please install it first."
    )

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

NUMPY_C_API = [
    ("NPY_NO_DEPRECATED_API", "NPY_1_9_API_VERSION")
]

pyx_files = [
    ("src.dary_heap.dary_heap", "src/dary_heap/dary_heap.pyx"),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Wrap each heap .pyx source in a C extension compiled against numpy.

    Parameters
    ----------
    pyx_files : list[tuple]
        `(module_name, pyx_path)` pairs, e.g. the `src.dary_heap.dary_heap`
        core heap module and its source file.

    Returns
    -------
    list[Extension]
        One extension per pair, built with `-O3` outside Windows.
    """
    extensions = []
    for module_name, pyx_path in pyx_files:
        extra_compile_args = [
            f"-D{name}={value}"
            for name, value in NUMPY_C_API
        ]
        if sys.platform != "win32":
            extra_compile_args.append("-O3")

        extension = Extension(
            name=module_name,
            sources=[pyx_path],
            include_dirs=[np.get_include()],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Main setup function for compiling"""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in pyx_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No .pyx files found to compile")

    extensions = create_extensions(files)

    setup(
        name="dary-heap",
        version="0.1.0",
        description="Array backed d-ary max heap with an interactive menu",
        python_requires=">=3.9",
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},
        entry_points={
            "console_scripts": ["dary-heap=src.dary_heap.cli:main"]
        },
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=["src", "src.dary_heap"],
        zip_safe=False
    )


if __name__ == "__main__":
    main()
