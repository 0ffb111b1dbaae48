from setuptools import setup, find_packages

setup(
    name="jobportal",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "python-dotenv",
        "python-multipart",
        "requests>=2.32.2",
        "PyJWT",
    ],
    extras_require={
        "dev": [
            "pytest",
            "httpx",
            "black",
            "isort",
            "mypy",
        ],
    },
    author="",
    author_email="",
    description="Job Portal API: listings, applications, scheduling and practice interviews",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="job portal, applications, interviews",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
    ],
)
