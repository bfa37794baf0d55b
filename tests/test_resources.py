import json

import pytest

from aztec_mcp.resources import (
    NETWORK_STATUS_URI,
    RESOURCES,
    UnknownResourceError,
    get_resource_content,
    list_resources,
)


async def _status():
    return {"node": True, "pxe": False}


async def _never():
    raise AssertionError("network status must not be fetched")


def test_resource_uris_are_unique():
    uris = [resource["uri"] for resource in list_resources()]
    assert len(uris) == len(set(uris)) == len(RESOURCES) == 7
    assert uris[0] == NETWORK_STATUS_URI


@pytest.mark.asyncio
async def test_network_status_is_json():
    content = await get_resource_content(NETWORK_STATUS_URI, _status)
    assert content["mimeType"] == "application/json"
    assert json.loads(content["text"]) == {"node": True, "pxe": False}


@pytest.mark.asyncio
async def test_guides_are_markdown_and_offline():
    for resource in RESOURCES[1:]:
        content = await get_resource_content(resource["uri"], _never)
        assert content["mimeType"] == "text/markdown"
        assert content["text"].startswith("# ")


@pytest.mark.asyncio
async def test_unknown_resource_raises():
    with pytest.raises(UnknownResourceError) as excinfo:
        await get_resource_content("aztec://docs/missing", _never)
    assert str(excinfo.value) == "Unknown resource: aztec://docs/missing"
