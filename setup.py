from setuptools import setup, find_packages

setup(
    name="streamscribe",
    version="0.1.0",
    author="streamscribe contributors",
    maintainer="streamscribe contributors",
    description="Streaming speech-to-text transport: audio chunk in, partial transcripts out over server-sent events",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["examples*", "tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",
        "fastapi>=0.115.0",
        "sse-starlette>=2.1.0",
        "google-genai>=1.0.0",
        "pydantic>=2.11.0",
    ],
    extras_require={
        "test": ["pytest>=8.0.0", "pytest-asyncio>=0.23.0"],
        "server": ["uvicorn>=0.30.0"],
    },
    license="Apache v2",
    classifiers=[
        "Programming Language :: Python :: 3"
    ]
)
