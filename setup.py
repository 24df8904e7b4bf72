# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, setup

# The public ``swap`` validates its indices itself; every other index in the
# extension is produced by the heap arithmetic and stays in range.
COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

pyx_files = [
    ("dary_heap.max_heap.max_heap", "dary_heap/max_heap/max_heap.pyx"),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Create Cython extension for all available .pyx files.

    Parameters
    ----------
    pyx_files : list[tuple]
        A list of tuples. The first element of the tuple is the .pyx file in
        `package.module` format. The second element is the `path` to the file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    extra_compile_args = [] if sys.platform == "win32" else ["-O3"]
    return [
        Extension(
            name=module_name,
            sources=[pyx_path],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        for module_name, pyx_path in pyx_files
    ]


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

    setup(
        name="dary-heap",
        version="0.1.0",
        description="Array-backed d-ary max-heap with a power-of-two fan-out",
        python_requires=">=3.9",
        ext_modules=cythonize(
            create_extensions(files),
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=["dary_heap", "dary_heap.max_heap"],
        extras_require={
            "test": ["pytest", "numpy"],
        },
        zip_safe=False
    )


if __name__ == "__main__":
    main()
