from setuptools import setup, find_packages

setup(
    name="payroll-keeper",
    version="0.1.0",
    packages=find_packages(include=["src", "src.*"]),
    install_requires=[
        'fastapi>=0.110.0',
        'uvicorn>=0.27.0',
        'pydantic>=2.0.0',
        'python-dotenv>=0.19.0',
        'requests>=2.28.0',
        'streamlit>=1.30.0',
        'pandas>=1.5.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'httpx>=0.24.0',
            'freezegun>=1.2.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'payroll-keeper=src.main:run',
        ],
    },
    python_requires=">=3.9",
    description="Payroll record keeper: employees and payroll entries in a JSON file behind a FastAPI API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
