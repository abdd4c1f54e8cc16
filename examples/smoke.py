import asyncio

from unified_chat import APIError, ChatClient, ClientConfig, ToolDef, TransportFailure

WEATHER = ToolDef(
    name="get_current_weather",
    description="Get the current weather for a location",
    json_schema={
        "type": "object",
        "properties": {
            "location": {"type": "string"},
            "format": {"type": "string", "enum": ["celsius", "fahrenheit"]},
        },
        "required": ["location", "format"],
    },
)


async def main() -> None:
    # Expects a local Ollama daemon; any failure is reported, not raised.
    async with ChatClient(ClientConfig(provider="ollama")) as client:
        try:
            resp = await client.chat("What is the weather in Paris?", tools=[WEATHER])
        except (APIError, TransportFailure) as e:
            print("Expected error:", type(e).__name__, e)
            return
        print(resp.text)
        for call in resp.tool_calls:
            print(call.function.name, call.function.arguments)


if __name__ == "__main__":
    asyncio.run(main())
