"""JSON schema of the financial recipe the chat endpoint generates."""

RECIPE_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Title of the financial advice or strategy"},
        "description": {"type": "string", "description": "Short description or context for the advice"},
        "strategies": {
            "type": "array",
            "description": "Financial strategies or actions, if any",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "detail": {"type": "string"},
                },
                "required": ["name"],
            },
        },
        "steps": {
            "type": "array",
            "description": "Ordered action steps, if any",
            "items": {
                "type": "object",
                "properties": {
                    "step": {"type": "number"},
                    "action": {"type": "string"},
                },
                "required": ["action"],
            },
        },
        "content": {"type": "string", "description": "Markdown or plain-text advice"},
        "tips": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["title"],
}
