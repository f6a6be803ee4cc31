#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="glslmerge",
        packages=["glslmerge"],
        python_requires='>=3.10.0',
        version="0.1.0",
        license="MIT",
        description="Merge GLSL fragments connected by #include directives",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        url="https://github.com/mirmik/glslmerge",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["glsl", "shader", "preprocessor"],
        classifiers=[],
        install_requires=[
        ],
        extras_require={
            "tests": [
                "pytest",
            ],
        },
        entry_points={
            "console_scripts": [
                "glslmerge = glslmerge.__main__:main",
            ],
        },
        zip_safe=False,
    )
