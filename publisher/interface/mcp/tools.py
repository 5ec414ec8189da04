"""Tool definitions advertised to the MCP host."""

import mcp.types as types

PUBLISH_POST = "publish_post"
LIST_TAGS = "list_tags"
LIST_CATEGORIES = "list_categories"

TOOLS: list[types.Tool] = [
    types.Tool(
        name=PUBLISH_POST,
        description=(
            "Publish a post to the Halo blog. Tags and categories are inferred "
            "from the content when not given."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Post title"},
                "content": {
                    "type": "string",
                    "description": "Post content (Markdown supported)",
                },
                "excerpt": {
                    "type": "string",
                    "description": "Post excerpt (optional)",
                },
                "slug": {
                    "type": "string",
                    "description": "Post slug used in the URL (optional)",
                },
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Tag names (optional, inferred when omitted)",
                },
                "categories": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Category names (optional, inferred when omitted)",
                },
                "allowComment": {
                    "type": "boolean",
                    "description": "Whether comments are allowed",
                    "default": True,
                },
                "pinned": {
                    "type": "boolean",
                    "description": "Whether the post is pinned",
                    "default": False,
                },
            },
            "required": ["title", "content"],
        },
    ),
    types.Tool(
        name=LIST_TAGS,
        description="List all tags on the Halo blog",
        inputSchema={"type": "object", "properties": {}},
    ),
    types.Tool(
        name=LIST_CATEGORIES,
        description="List all categories on the Halo blog",
        inputSchema={"type": "object", "properties": {}},
    ),
]
