from setuptools import setup, find_packages

setup(
    name="wheeltimer",
    version="0.1.0",
    description="Countdown timer with hour, minute and second digit wheels",
    packages=find_packages(include=["wheeltimer", "wheeltimer.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML",  # config.yaml; Tkinter ships with CPython
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "wheeltimer=wheeltimer.main:main"
        ]
    },
)
