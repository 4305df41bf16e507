from setuptools import setup, find_packages

# The qevolve runtime library plus the small project_config helpers (logging).
setup(
    name="qevolve",
    version="0.1.0",
    packages=find_packages(include=["qevolve", "qevolve.*", "project_config", "project_config.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "qutip>=5.0",
        "psutil",
    ],
    extras_require={"test": ["pytest"]},
    author="Leopold Bodamer",
    description="Fixed-step time evolution of closed and open finite-dimensional quantum systems",
)
