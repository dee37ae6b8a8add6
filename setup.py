from setuptools import setup, find_packages

setup(
    name="bloomsnake",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "flask>=2.0",  # Battlesnake HTTP server
        "PyYAML",  # For weight override files
        "python-dotenv>=1.0.0",  # For .env configuration
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bloomsnake=bloomsnake.cli:main",
        ],
    },
    description="Influence-grid Battlesnake that scores the board and moves greedily",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
