# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: SampleData
# -----------------------------------------------------------------------------
from typing import Dict


def sample_data() -> Dict[str, str]:
    """GitHub URLs -> short descriptions."""
    return {
        "https://github.com/microsoft/semantic-kernel/blob/main/README.md":
            "README: Installation, getting started, and how to contribute",
        "https://github.com/microsoft/semantic-kernel/blob/main/samples/notebooks/dotnet/02-running-prompts-from-file.ipynb":
            "Jupyter notebook describing how to pass prompts from a file to a semantic skill or function",
        "https://github.com/microsoft/semantic-kernel/blob/main/samples/notebooks/dotnet/00-getting-started.ipynb":
            "Jupyter notebook describing how to get started with the Semantic Kernel",
        "https://github.com/microsoft/semantic-kernel/tree/main/samples/skills/ChatSkill/ChatGPT":
            "Sample demonstrating how to create a chat skill interfacing with ChatGPT",
        "https://github.com/microsoft/semantic-kernel/blob/main/dotnet/src/SemanticKernel/Memory/VolatileMemoryStore.cs":
            "C# class that defines a volatile embedding store",
        "https://github.com/microsoft/semantic-kernel/blob/main/samples/dotnet/KernelHttpServer/README.md":
            "README: How to set up a Semantic Kernel Service API using Azure Function Runtime v4",
        "https://github.com/microsoft/semantic-kernel/blob/main/samples/apps/chat-summary-webapp-react/README.md":
            "README: README associated with a sample chat summary react-based webapp",
    }


def sample_data_with_no_mapping() -> Dict[str, str]:
    """Plain ids that need no encoding."""
    return {
        "id_1": "This is test 1",
        "id_2": "This is test 2",
    }


# Storage key of the README entry above (URL-safe base64 of the URL)
README_KEY = "aHR0cHM6Ly9naXRodWIuY29tL21pY3Jvc29mdC9zZW1hbnRpYy1rZXJuZWwvYmxvYi9tYWluL1JFQURNRS5tZA=="
