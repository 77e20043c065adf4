from setuptools import find_packages, setup


setup(
    name="QRFileServer",
    version="1.0.0",
    description="Local network file server that prints a QR code with its address",
    long_description=open("README.md", encoding="UTF8").read(),
    long_description_content_type="text/markdown",
    author="Rud356",
    author_email="rud356github@gmail.com",
    python_requires=">=3.11.0",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows :: Windows 10",
        "Operating System :: Microsoft :: Windows :: Windows 11",
        "Intended Audience :: End Users/Desktop",
        "Natural Language :: Russian",
    ],
    install_requires=[
        "fastapi[standard]~=0.115.12",
        "starlette>=0.46.2",
        "uvicorn~=0.34.0",
        "pydantic~=2.10",
        "anyio>=4.0",
        "qrcode~=8.0",
    ],
    extras_require={
        "linters": ["ruff~=0.11.2", "mypy~=1.15.0"],
        "dev": [
            "ruff>=0.11.2",
            "pytest>=8.3.5,<9.0.0",
            "pytest_asyncio>=0.26.0,<1.0.0",
            "httpx>=0.27.0",
        ],
    },
    packages=find_packages(include=["qr_file_server", "qr_file_server.*"]),
    entry_points={
        "console_scripts": [
            "qr-file-server = qr_file_server.main:run_server",
        ],
    },
)
