"""Prompt composer — turns one route file into a documentation request."""

from nextjs_openapi.scanner.base import RouteUnit

PROMPT_TEMPLATE = """Analyze this Next.js API route file and extract OpenAPI information.

File: {file_path}
File Type: {file_type}
Content:
{content}

IMPORTANT: Return ONLY valid JSON with no markdown formatting, no backticks, no code blocks.

Return this exact JSON structure:
{{
  "path": "/api/path/here",
  "description": "Brief description of what this API endpoint does",
  "methods": {{
    "GET": {{
      "summary": "Brief summary",
      "description": "Detailed description",
      "parameters": [
        {{
          "name": "paramName",
          "type": "string",
          "in": "path",
          "required": true
        }}
      ]
    }}
  }}
}}

Required fields: "path", "description", "methods". Each method maps to an object with
"summary", "description" and "parameters". Parameter "in" is one of "path", "query" or "body".

Rules:
1. Convert dynamic segments like [id] to {{id}} in the path
2. Convert catch-all segments like [...slug] to {{slug}} in the path
3. Only include methods that are actually implemented in the code
4. Return ONLY the JSON, no markdown, no explanations, no code blocks
"""


def build_prompt(route: RouteUnit) -> str:
    """Compose the documentation prompt for a single route file."""
    return PROMPT_TEMPLATE.format(
        file_path=route.file_path,
        file_type=route.file_type,
        content=route.content,
    )
