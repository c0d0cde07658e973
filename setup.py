"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="dietplan-api",
    version="1.0.0",
    description="Patient and diet management REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "motor>=3.3",
        "pymongo>=4.6",
        "pydantic[email]>=2.5",
        "pydantic-settings>=2.1",
        "PyJWT>=2.8",
        "passlib[bcrypt]>=1.7.4",
        # passlib reads bcrypt.__about__, removed in bcrypt 4.1+
        "bcrypt==4.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "mongomock-motor>=0.0.29",
        ],
    },
    python_requires=">=3.10",
)
