from setuptools import setup, find_namespace_packages

setup(
    name="hprices",
    description="Fetches and merges historic stock prices into hledger price journals",
    author="kkorolyov",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages("src"),
    python_requires=">=3.9",
    install_requires=("requests",),
    extras_require={"tests": ("pytest",)},
    entry_points={"console_scripts": ("hprices=hprices.__main__:main",)},
)
