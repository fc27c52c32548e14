from setuptools import setup, find_packages

setup(
	name="AnthropicAPI",
	version="0.1.0",
	description="A minimal client for the Anthropic Messages, Text Completions and Embeddings HTTP APIs.",
	long_description=open("README.md").read(),
	long_description_content_type="text/markdown",
	packages=find_packages(include=["AnthropicAPI", "AnthropicAPI.*"]),
	classifiers=[
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	],
	python_requires=">=3.10",
	install_requires=[
		"requests",
		"dataclasses-json",
	],
	extras_require={
		"dev": ["pytest"],
	},
)
