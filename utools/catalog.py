"""
Static catalog of the available tools.
"""

import pandas as pd

FIELDS = ["id", "name", "description", "category", "icon", "href"]

TOOLS = [
    {
        "id": "reverse-complement",
        "name": "Reverse Complement",
        "description": "Compute the reverse complement of a DNA sequence for molecular biology work",
        "category": "Biology",
        "icon": "🧬",
        "href": "/tools/reverse-complement",
    },
]


def get_categories(tools=None) -> list[str]:
    """unique categories in first-seen order

    >>> get_categories()
    ['Biology']
    """
    if tools is None:
        tools = TOOLS
    return list(dict.fromkeys(tool["category"] for tool in tools))


def tools_by_category(tools=None) -> dict[str, list[dict]]:
    if tools is None:
        tools = TOOLS
    res = {category: [] for category in get_categories(tools)}
    for tool in tools:
        res[tool["category"]].append(tool)
    return res


def get_tool(tool_id: str, tools=None) -> dict:
    """
    >>> get_tool("reverse-complement")["href"]
    '/tools/reverse-complement'
    """
    if tools is None:
        tools = TOOLS
    for tool in tools:
        if tool["id"] == tool_id:
            return tool
    raise ValueError(f"Unknown tool: {tool_id}")


def to_dataframe(tools=None) -> pd.DataFrame:
    if tools is None:
        tools = TOOLS
    return pd.DataFrame(tools, columns=FIELDS)
