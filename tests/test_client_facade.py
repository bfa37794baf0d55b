import asyncio

import pytest

from aztec_mcp.aztec_api import AztecClient, RpcError, TransportError, UrlUpdate
from aztec_mcp.config import AztecConfig

PXE = "http://pxe:8080"
NODE = "http://node:8080"
L1 = "http://l1:8545"


class StubTransport:
    """Answers by RPC method name; exceptions in the table are raised."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.calls = []

    async def call(self, url, method, params=None):
        self.calls.append((url, method, params or []))
        answer = self.answers.get(method)
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return await answer()
        return answer

    async def aclose(self):
        return None


def make_client(answers=None):
    transport = StubTransport(answers)
    client = AztecClient(
        AztecConfig(pxe_url=PXE, node_url=NODE, l1_rpc_url=L1), transport=transport
    )
    return client, transport


@pytest.mark.asyncio
async def test_node_methods_route_to_node_url():
    client, transport = make_client({"aztec_getBlockNumber": 12, "aztec_getBlock": {"n": 3}})
    assert await client.get_block_number() == 12
    assert await client.get_block(3) == {"n": 3}
    await client.get_block()
    assert transport.calls == [
        (NODE, "aztec_getBlockNumber", []),
        (NODE, "aztec_getBlock", [3]),
        (NODE, "aztec_getBlock", []),
    ]


@pytest.mark.asyncio
async def test_pxe_methods_route_to_pxe_url():
    client, transport = make_client({"pxe_getRegisteredAccounts": ["0xa", "0xb"]})
    accounts = await client.get_registered_accounts()
    assert accounts == [{"address": "0xa"}, {"address": "0xb"}]
    assert transport.calls == [(PXE, "pxe_getRegisteredAccounts", [])]


@pytest.mark.asyncio
async def test_derived_node_info_fields():
    info = {
        "l1ChainId": 31337,
        "protocolVersion": 1,
        "l1ContractAddresses": {"rollupAddress": "0xr"},
    }
    client, _ = make_client({"node_getInfo": info})
    assert await client.get_chain_id() == 31337
    assert await client.get_protocol_version() == 1
    assert await client.get_l1_contract_addresses() == {"rollupAddress": "0xr"}
    assert await client.get_protocol_contract_addresses() == {}


@pytest.mark.asyncio
async def test_get_logs_drops_unset_filters():
    client, transport = make_client({"pxe_getLogs": []})
    await client.get_logs(from_block=1, contract_address="0xc")
    assert transport.calls[0] == (PXE, "pxe_getLogs", [{"fromBlock": 1, "contractAddress": "0xc"}])


@pytest.mark.asyncio
async def test_register_account_echoes_partial_address():
    client, _ = make_client({"pxe_registerAccount": {"address": "0xa", "publicKey": "0xk"}})
    assert await client.register_account("sk", "0xpartial") == {
        "address": "0xa",
        "publicKey": "0xk",
        "partialAddress": "0xpartial",
    }


@pytest.mark.asyncio
async def test_lookups_return_none_on_failure():
    err = RpcError(-32000, "not found")
    client, _ = make_client(
        {
            "pxe_getRegisteredAccountPublicKey": err,
            "pxe_getContractInstance": TransportError("down"),
            "pxe_getAuthWitness": err,
            "pxe_getL1ToL2MembershipWitness": err,
        }
    )
    assert await client.get_account_public_key("0xa") is None
    assert await client.get_contract_instance("0xc") is None
    assert await client.get_auth_witness("0xh") is None
    assert await client.get_l1_to_l2_message_witness("0xc", "0xm", "s") is None


PROPAGATING_CALLS = [
    ("node_getInfo", lambda c: c.get_node_info()),
    ("pxe_getContractClass", lambda c: c.get_contract_class("0xclass")),
    ("pxe_registerContract", lambda c: c.register_contract("0xc", {"name": "Token"})),
    ("pxe_registerSender", lambda c: c.register_sender("0xs")),
    ("pxe_sendTx", lambda c: c.send_transaction({"tx": 1})),
    ("aztec_getTransactionReceipt", lambda c: c.get_transaction_receipt("0xtx")),
    ("pxe_computeSecretHash", lambda c: c.compute_secret_hash("0xsecret")),
    ("pxe_getPendingTxs", lambda c: c.get_pending_txs()),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [TransportError("down"), RpcError(-32000, "boom")])
@pytest.mark.parametrize("method,invoke", PROPAGATING_CALLS)
async def test_other_methods_propagate_errors(method, invoke, error):
    client, _ = make_client({method: error})
    with pytest.raises(type(error)) as excinfo:
        await invoke(client)
    assert excinfo.value is error


NON_OBJECT_RESULTS = [[1, 2], "ok", 5]


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", NON_OBJECT_RESULTS)
async def test_simulate_non_object_result_still_reports_success(raw):
    client, _ = make_client({"pxe_simulateTx": raw})
    assert await client.simulate_transaction({}) == {
        "success": True,
        "returnValues": None,
        "gasUsed": None,
        "logs": None,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", NON_OBJECT_RESULTS)
async def test_node_info_projections_tolerate_non_object(raw):
    client, _ = make_client({"node_getInfo": raw})
    assert await client.get_chain_id() is None
    assert await client.get_protocol_version() is None
    assert await client.get_l1_contract_addresses() == {}
    assert await client.get_protocol_contract_addresses() == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", NON_OBJECT_RESULTS)
async def test_register_account_tolerates_non_object(raw):
    client, _ = make_client({"pxe_registerAccount": raw})
    assert await client.register_account("sk", "0xp") == {
        "address": None,
        "publicKey": None,
        "partialAddress": "0xp",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", NON_OBJECT_RESULTS)
async def test_receipt_tolerates_non_object(raw):
    client, _ = make_client({"aztec_getTransactionReceipt": raw})
    assert await client.get_transaction_receipt("0x1") == {"txHash": "0x1", "status": None}


@pytest.mark.asyncio
async def test_simulate_transaction_success_and_failure():
    client, _ = make_client(
        {"pxe_simulateTx": {"returnValues": [1], "gasUsed": {"l2": 5}, "logs": [], "extra": 1}}
    )
    assert await client.simulate_transaction({"tx": 1}) == {
        "success": True,
        "returnValues": [1],
        "gasUsed": {"l2": 5},
        "logs": [],
    }

    client, _ = make_client({"pxe_simulateTx": RpcError(-1, "reverted")})
    result = await client.simulate_transaction({"tx": 1})
    assert result["success"] is False
    assert "reverted" in result["error"]


@pytest.mark.asyncio
async def test_receipt_includes_hash_and_omits_missing_fields():
    client, transport = make_client(
        {"aztec_getTransactionReceipt": {"status": "success", "blockNumber": 9}}
    )
    receipt = await client.get_transaction_receipt("0xtx")
    assert receipt == {"txHash": "0xtx", "status": "success", "blockNumber": 9}
    assert transport.calls[0][0] == NODE


@pytest.mark.asyncio
async def test_receipt_passes_unknown_status_through():
    client, _ = make_client({"aztec_getTransactionReceipt": {"status": "app_logic_reverted"}})
    receipt = await client.get_transaction_receipt("0xtx")
    assert receipt["status"] == "app_logic_reverted"


@pytest.mark.asyncio
async def test_generate_secret_and_hash_hashes_generated_secret():
    client, transport = make_client({"pxe_generateSecret": "0xsecret", "pxe_computeSecretHash": "0xhash"})
    assert await client.generate_secret_and_hash() == {"secret": "0xsecret", "hash": "0xhash"}
    assert transport.calls[1] == (PXE, "pxe_computeSecretHash", ["0xsecret"])


@pytest.mark.asyncio
async def test_generate_secret_failure_skips_hash():
    client, transport = make_client({"pxe_generateSecret": RpcError(-1, "boom")})
    with pytest.raises(RpcError):
        await client.generate_secret_and_hash()
    assert [method for _, method, _ in transport.calls] == ["pxe_generateSecret"]


@pytest.mark.asyncio
async def test_health_probes_map_errors_to_false():
    client, _ = make_client(
        {"node_getInfo": TransportError("down"), "pxe_getRegisteredAccounts": []}
    )
    assert await client.is_node_healthy() is False
    assert await client.is_pxe_healthy() is True


@pytest.mark.asyncio
async def test_health_check_both_healthy_includes_extras():
    client, _ = make_client(
        {
            "node_getInfo": {},
            "pxe_getRegisteredAccounts": [],
            "aztec_getBlockNumber": 77,
            "pxe_getSyncStatus": {"blocks": 77},
        }
    )
    assert await client.health_check() == {
        "node": True,
        "pxe": True,
        "blockNumber": 77,
        "syncStatus": {"blocks": 77},
    }


@pytest.mark.asyncio
async def test_health_check_both_down_omits_extras():
    down = TransportError("down")
    client, _ = make_client({"node_getInfo": down, "pxe_getRegisteredAccounts": down})
    assert await client.health_check() == {"node": False, "pxe": False}


@pytest.mark.asyncio
async def test_health_check_tolerates_extra_failures():
    client, _ = make_client(
        {
            "node_getInfo": {},
            "pxe_getRegisteredAccounts": [],
            "aztec_getBlockNumber": RpcError(-1, "x"),
            "pxe_getSyncStatus": RpcError(-1, "y"),
        }
    )
    assert await client.health_check() == {"node": True, "pxe": True}


@pytest.mark.asyncio
async def test_health_check_probes_run_concurrently():
    # Each probe waits for the other to start; sequential probing would deadlock.
    node_started = asyncio.Event()
    pxe_started = asyncio.Event()

    async def node_probe():
        node_started.set()
        await pxe_started.wait()
        return {}

    async def pxe_probe():
        pxe_started.set()
        await node_started.wait()
        return []

    client, _ = make_client({"node_getInfo": node_probe, "pxe_getRegisteredAccounts": pxe_probe})
    result = await asyncio.wait_for(client.health_check(), timeout=2)
    assert result["node"] is True
    assert result["pxe"] is True


def test_example_contracts_are_static():
    client, transport = make_client()
    contracts = client.get_available_example_contracts()
    assert "TokenContract" in contracts
    assert len(contracts) == len(set(contracts))
    assert transport.calls == []


@pytest.mark.asyncio
async def test_set_urls_applies_only_provided_fields():
    client, transport = make_client({"aztec_getBlockNumber": 1})
    client.set_urls(UrlUpdate(node="http://new-node"))
    assert client.get_urls() == {"pxe": PXE, "node": "http://new-node", "l1": L1}
    await client.get_block_number()
    assert transport.calls[-1][0] == "http://new-node"

    client.set_urls(UrlUpdate(pxe="", l1="http://new-l1"))
    assert client.get_urls() == {"pxe": PXE, "node": "http://new-node", "l1": "http://new-l1"}


def test_url_update_from_mapping_ignores_non_strings():
    update = UrlUpdate.from_mapping({"pxe": "http://p", "node": 5})
    assert update == UrlUpdate(pxe="http://p", node=None, l1=None)
