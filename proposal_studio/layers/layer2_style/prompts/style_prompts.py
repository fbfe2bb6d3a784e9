"""Prompts and response schema for style profile generation."""

STYLE_SYSTEM_PROMPT = (
    "You are a senior luxury wedding designer. Your output must be calm, luxurious, "
    "and confidence-building. Respond only with validated JSON matching the requested schema."
)

STYLE_PROFILE_PROMPT = """You are a luxury wedding planner assistant. Analyze the following client intake and generate a "Style Profile".

Client: {couple_name}
Location: {location}
Vibe Tags: {vibe_tags}
Notes: {notes}
Season/Date: {event_date}

Create a cohesive, calm, and luxurious design profile."""

# Gemini responseSchema (OpenAPI 부분집합)
STYLE_PROFILE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "palette": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Array of 5 hex color codes representing the wedding palette.",
        },
        "adjectives": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "3-5 sophisticated adjectives describing the vibe (e.g., Ethereal, Timeless).",
        },
        "motifs": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "3 design motifs (e.g., Trailing Ivy, Brass Accents).",
        },
        "venueTypes": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "3 suggested venue types (e.g., Historic Estate, Modern Loft).",
        },
        "summary": {
            "type": "STRING",
            "description": "A 2-sentence executive summary of the design vision.",
        },
    },
    "required": ["palette", "adjectives", "motifs", "venueTypes", "summary"],
}
