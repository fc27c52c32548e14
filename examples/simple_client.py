"""
Simple example of using the AnthropicAPI client.
"""

from AnthropicAPI import AnthropicClient, MessageRequest, APIException
from AnthropicAPI.helpers import error_dict
import json

def main():
    request = MessageRequest(
        model="claude-3-5-sonnet-20240620",
        messages=[
            {"role": "user", "content": "Hello, Claude"}
        ]
    ).with_max_tokens(1024).with_temperature(1.0)

    try:
        # Create a client from ANTHROPIC_API_KEY
        client = AnthropicClient.from_env()
        response = client.messages.create(request)
    except (APIException, ValueError) as e:
        response = error_dict(e)
    
    print(json.dumps(response, indent=4))

if __name__ == "__main__":
    main()
