from setuptools import setup, find_namespace_packages

setup(
    name="semantic-placeholder",
    version="0.2.0",
    description="Insert inline SVG placeholder images sized by dimensions or aspect ratio.",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(where="src", include=["semantic_placeholder*"]),
    package_dir={"": "src"},
    entry_points={
        "console_scripts": [
            "placeholder-insert=semantic_placeholder.insert:main",
            "placeholder-insert-ratio=semantic_placeholder.insert_ratio:main",
            "placeholder-insert-preset=semantic_placeholder.insert_preset:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
    install_requires=[
        'platformdirs>=4.2.0',
    ],
    extras_require={
        "test": [
            'pytest>=8.0.0',
        ],
    },
)
