"""Claude on Amazon Bedrock."""

from .client import BedrockClaudeProvider, create_bedrock_client

__all__ = ["BedrockClaudeProvider", "create_bedrock_client"]
