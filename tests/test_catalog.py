from aztec_mcp.catalog import (
    ACCOUNT_TYPES,
    TOOL_CATEGORIES,
    TOOL_COUNT,
    TOOLS,
    get_tool,
)
from aztec_mcp.mcp import TOOL_HANDLERS, list_tools


def test_tool_names_are_unique():
    names = [tool.name for tool in TOOLS]
    assert len(names) == len(set(names))
    assert TOOL_COUNT == len(names) == 47


def test_every_tool_has_object_schema_with_known_required_fields():
    for tool in TOOLS:
        schema = tool.input_schema
        assert schema["type"] == "object", tool.name
        assert tool.description, tool.name
        assert set(schema["required"]) <= set(schema["properties"]), tool.name


def test_categories_partition_the_catalog():
    counts = {category: len(names) for category, names in TOOL_CATEGORIES.items()}
    assert counts == {
        "network": 8,
        "account": 6,
        "contract": 7,
        "transaction": 7,
        "bridge": 5,
        "validator": 5,
        "governance": 4,
        "crypto": 5,
    }
    flattened = [name for names in TOOL_CATEGORIES.values() for name in names]
    assert flattened == [tool.name for tool in TOOLS]


def test_every_catalog_tool_has_a_handler():
    assert set(TOOL_HANDLERS) == {tool.name for tool in TOOLS}


def test_create_account_type_enum_and_default():
    schema = get_tool("aztec_create_account").input_schema
    account_type = schema["properties"]["type"]
    assert account_type["enum"] == ACCOUNT_TYPES
    assert account_type["default"] == "schnorr"
    assert schema["required"] == []


def test_get_sequencers_command_enum():
    schema = get_tool("aztec_get_sequencers").input_schema
    assert schema["properties"]["command"]["enum"] == ["list", "who-next"]


def test_deploy_contract_required_fields():
    schema = get_tool("aztec_deploy_contract").input_schema
    assert schema["required"] == ["artifact", "from"]
    assert schema["properties"]["args"]["type"] == "array"


def test_get_tool_unknown_returns_none():
    assert get_tool("aztec_nope") is None


def test_list_tools_wire_shape():
    tools = list_tools()
    assert tools[0]["name"] == "aztec_get_node_info"
    assert set(tools[0]) == {"name", "description", "inputSchema"}
    assert len(tools) == TOOL_COUNT


def test_list_tools_output_does_not_alias_catalog():
    tools = list_tools()
    tools[0]["inputSchema"]["properties"]["injected"] = {"type": "string"}
    tools[0]["inputSchema"]["required"].append("injected")
    fresh = get_tool(tools[0]["name"]).to_dict()["inputSchema"]
    assert "injected" not in fresh["properties"]
    assert "injected" not in fresh["required"]
