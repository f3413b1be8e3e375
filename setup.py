import os
from setuptools import setup, find_packages

SERVICE_SOURCES = {
    "accuracy_monitoring": "services/accuracy_monitoring/src",
    "race_common": "services/race-common/src",
}

packages = []
package_dir = {}
for package, src in SERVICE_SOURCES.items():
    for found in find_packages(where=src, include=[package, f"{package}.*"]):
        packages.append(found)
    package_dir[package] = os.path.join(src, package)

setup(
    name="RaceAccuracyMonitor",
    version="0.1.0",
    packages=packages,
    package_dir=package_dir,
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "prometheus-client>=0.19.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "sqlalchemy[asyncio]>=2.0.0",
        "asyncpg>=0.29.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "accuracy-monitoring=accuracy_monitoring.main:main",
        ],
    },
    author="Aiden Gindin",
    author_email="aiden@aidengindin.com",
    description="Validates race predictions against results and records accuracy metrics",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
