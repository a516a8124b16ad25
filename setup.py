"""
Setup script for the timetable_data service.
"""
from setuptools import setup, find_packages

setup(
    name="timetable-data-service",
    version="1.0.0",
    description="Serverless CRUD service for timetables stored in MongoDB",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["function_app"],
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "pymongo>=4.0.0",
        "azure-functions>=1.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
            "mongomock>=4.1.0",
        ],
    },
)
