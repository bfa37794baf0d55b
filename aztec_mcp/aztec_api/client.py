"""
Typed client for the Aztec node and PXE JSON-RPC surfaces.

Each method maps one capability onto an (endpoint, RPC method, params) triple.
Existence-style lookups return None instead of raising; everything else lets
transport errors propagate to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import httpx

from aztec_mcp.aztec_api.transport import AztecApiError, JsonRpcTransport
from aztec_mcp.config import AztecConfig, default_config

logger = logging.getLogger(__name__)

# Known receipt statuses; anything else from upstream is passed through as-is.
RECEIPT_STATUSES = frozenset({"success", "failed", "pending", "dropped"})

EXAMPLE_CONTRACTS = (
    "TokenContract",
    "TokenBridgeContract",
    "CounterContract",
    "EasyPrivateVotingContract",
    "EscrowContract",
    "CardGameContract",
    "CrowdfundingContract",
    "DocsExampleContract",
    "EcdsaKAccountContract",
    "EcdsaRAccountContract",
    "FPCContract",
    "InclusionProofsContract",
    "MultiCallEntrypointContract",
    "NFTContract",
    "PendingNoteHashesContract",
    "PriceFeedContract",
    "SchnorrAccountContract",
    "SchnorrHardcodedAccountContract",
    "SchnorrSingleKeyAccountContract",
    "SlowTreeContract",
    "StatefulTestContract",
    "TestContract",
    "UniswapContract",
)


def _drop_none(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _as_dict(value: Any) -> Dict[str, Any]:
    # Non-object results project to missing fields.
    return value if isinstance(value, dict) else {}


@dataclass(slots=True)
class UrlUpdate:
    """Partial endpoint update; only truthy fields are applied."""

    pxe: Optional[str] = None
    node: Optional[str] = None
    l1: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "UrlUpdate":
        def _pick(key: str) -> Optional[str]:
            value = values.get(key)
            return value if isinstance(value, str) else None

        return cls(pxe=_pick("pxe"), node=_pick("node"), l1=_pick("l1"))


class AztecClient:
    """Async facade over the node and PXE endpoints."""

    def __init__(
        self,
        config: AztecConfig | None = None,
        *,
        pxe_url: Optional[str] = None,
        node_url: Optional[str] = None,
        l1_rpc_url: Optional[str] = None,
        transport: Optional[JsonRpcTransport] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._pxe_url = pxe_url or self.config.pxe_url
        # Sandbox mode: without a node URL the PXE endpoint answers node calls too.
        self._node_url = node_url or self.config.node_url or self._pxe_url
        self._l1_rpc_url = l1_rpc_url or self.config.l1_rpc_url
        self.transport = transport or JsonRpcTransport(
            timeout=self.config.timeout, async_client=async_client
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def _node(self, method: str, params: Optional[List[Any]] = None) -> Any:
        return await self.transport.call(self._node_url, method, params)

    async def _pxe(self, method: str, params: Optional[List[Any]] = None) -> Any:
        return await self.transport.call(self._pxe_url, method, params)

    # Node and network information

    async def get_node_info(self) -> Dict[str, Any]:
        """Return version, L1 chain id, protocol version, and contract addresses."""
        return await self._node("node_getInfo")

    async def get_block_number(self) -> int:
        return await self._node("aztec_getBlockNumber")

    async def get_block(self, block_number: Optional[int] = None) -> Dict[str, Any]:
        """Fetch a block by number, or the latest block when no number is given."""
        params = [block_number] if block_number is not None else []
        return await self._node("aztec_getBlock", params)

    async def get_current_base_fee(self) -> Dict[str, Any]:
        return await self._node("aztec_getCurrentBaseFee")

    async def get_chain_id(self) -> Optional[int]:
        info = _as_dict(await self.get_node_info())
        return info.get("l1ChainId")

    async def get_protocol_version(self) -> Optional[int]:
        info = _as_dict(await self.get_node_info())
        return info.get("protocolVersion")

    async def get_l1_contract_addresses(self) -> Dict[str, Any]:
        info = _as_dict(await self.get_node_info())
        return info.get("l1ContractAddresses") or {}

    async def get_protocol_contract_addresses(self) -> Dict[str, Any]:
        info = _as_dict(await self.get_node_info())
        return info.get("protocolContractAddresses") or {}

    async def get_logs(
        self,
        *,
        tx_hash: Optional[str] = None,
        from_block: Optional[int] = None,
        to_block: Optional[int] = None,
        contract_address: Optional[str] = None,
        after_log: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch public logs; unset filters are left out of the request."""
        filters = _drop_none(
            {
                "txHash": tx_hash,
                "fromBlock": from_block,
                "toBlock": to_block,
                "contractAddress": contract_address,
                "afterLog": after_log,
            }
        )
        return await self._pxe("pxe_getLogs", [filters])

    # Accounts

    async def get_registered_accounts(self) -> List[Dict[str, Any]]:
        accounts = await self._pxe("pxe_getRegisteredAccounts")
        return [{"address": address} for address in accounts or []]

    async def register_account(self, secret_key: str, partial_address: str) -> Dict[str, Any]:
        result = _as_dict(await self._pxe("pxe_registerAccount", [secret_key, partial_address]))
        return {
            "address": result.get("address"),
            "publicKey": result.get("publicKey"),
            "partialAddress": partial_address,
        }

    async def get_account_public_key(self, address: str) -> Optional[str]:
        """Return the account's public key, or None if the PXE does not know it."""
        try:
            return await self._pxe("pxe_getRegisteredAccountPublicKey", [address])
        except AztecApiError:
            return None

    async def register_sender(self, address: str) -> None:
        await self._pxe("pxe_registerSender", [address])

    # Contracts

    async def get_contract_instance(self, address: str) -> Optional[Dict[str, Any]]:
        """Return the contract instance, or None if it is not registered."""
        try:
            return await self._pxe("pxe_getContractInstance", [address])
        except AztecApiError:
            return None

    async def get_contract_class(self, class_id: str) -> Any:
        return await self._pxe("pxe_getContractClass", [class_id])

    async def register_contract(
        self,
        address: str,
        artifact: Any,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        await self._pxe("pxe_registerContract", [address, artifact, options])

    async def is_contract_class_publicly_registered(self, class_id: str) -> bool:
        return await self._node("aztec_isContractClassPubliclyRegistered", [class_id])

    async def is_contract_publicly_deployed(self, address: str) -> bool:
        return await self._node("aztec_isContractPubliclyDeployed", [address])

    # Transactions

    async def send_transaction(
        self, tx_request: Any, options: Optional[Dict[str, Any]] = None
    ) -> str:
        return await self._pxe("pxe_sendTx", [tx_request, options])

    async def simulate_transaction(
        self, tx_request: Any, options: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Simulate a transaction without sending it.

        Simulation failure is reported in-band: RPC and transport errors come
        back as ``{"success": False, "error": message}`` instead of raising.
        """
        try:
            result = _as_dict(await self._pxe("pxe_simulateTx", [tx_request, options]))
        except AztecApiError as exc:
            return {"success": False, "error": str(exc) or exc.__class__.__name__}
        return {
            "success": True,
            "returnValues": result.get("returnValues"),
            "gasUsed": result.get("gasUsed"),
            "logs": result.get("logs"),
        }

    async def get_transaction_receipt(self, tx_hash: str) -> Dict[str, Any]:
        receipt = _as_dict(await self._node("aztec_getTransactionReceipt", [tx_hash]))
        status = receipt.get("status")
        if status is not None and status not in RECEIPT_STATUSES:
            logger.debug("Unrecognized receipt status %r for tx %s", status, tx_hash)
        return {
            "txHash": tx_hash,
            "status": status,
            **_drop_none(
                {
                    "blockNumber": receipt.get("blockNumber"),
                    "blockHash": receipt.get("blockHash"),
                    "error": receipt.get("error"),
                    "transactionFee": receipt.get("transactionFee"),
                }
            ),
        }

    async def get_tx_effect(self, tx_hash: str) -> Any:
        return await self._node("aztec_getTxEffect", [tx_hash])

    async def get_pending_txs(self) -> List[str]:
        return await self._pxe("pxe_getPendingTxs")

    async def estimate_gas(self, tx_request: Any) -> Dict[str, Any]:
        return await self._pxe("pxe_estimateGas", [tx_request])

    # Authorization witnesses

    async def create_auth_witness(self, message_hash: str, secret_key: str) -> Dict[str, Any]:
        return await self._pxe("pxe_createAuthWitness", [message_hash, secret_key])

    async def add_auth_witness(self, witness: str) -> None:
        await self._pxe("pxe_addAuthWitness", [witness])

    async def get_auth_witness(self, message_hash: str) -> Optional[str]:
        try:
            return await self._pxe("pxe_getAuthWitness", [message_hash])
        except AztecApiError:
            return None

    # Notes and sync state

    async def get_notes(
        self,
        contract_address: str,
        *,
        storage_slot: Optional[str] = None,
        owner: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Any]:
        """Fetch notes; ``status`` is "active" or "nullified" when given."""
        query = _drop_none(
            {
                "contractAddress": contract_address,
                "storageSlot": storage_slot,
                "owner": owner,
                "status": status,
            }
        )
        return await self._pxe("pxe_getNotes", [query])

    async def add_note(self, note: Any) -> None:
        await self._pxe("pxe_addNote", [note])

    async def get_sync_status(self) -> Dict[str, Any]:
        return await self._pxe("pxe_getSyncStatus")

    async def is_global_state_synchronized(self) -> bool:
        return await self._pxe("pxe_isGlobalStateSynchronized")

    async def is_account_synchronized(self, address: str) -> bool:
        return await self._pxe("pxe_isAccountStateSynchronized", [address])

    # L1 to L2 messaging

    async def get_l1_to_l2_message_witness(
        self, contract_address: str, message_hash: str, secret: str
    ) -> Optional[Dict[str, Any]]:
        try:
            return await self._pxe(
                "pxe_getL1ToL2MembershipWitness", [contract_address, message_hash, secret]
            )
        except AztecApiError:
            return None

    # Secrets

    async def compute_secret_hash(self, secret: str) -> str:
        return await self._pxe("pxe_computeSecretHash", [secret])

    async def generate_secret_and_hash(self) -> Dict[str, str]:
        """Ask the PXE for a random secret, then hash it on the same endpoint."""
        secret = await self._pxe("pxe_generateSecret")
        secret_hash = await self.compute_secret_hash(secret)
        return {"secret": secret, "hash": secret_hash}

    # Health

    async def is_node_healthy(self) -> bool:
        try:
            await self.get_node_info()
        except AztecApiError:
            return False
        return True

    async def is_pxe_healthy(self) -> bool:
        try:
            await self.get_registered_accounts()
        except AztecApiError:
            return False
        return True

    async def health_check(self) -> Dict[str, Any]:
        """
        Probe node and PXE concurrently, then fetch extras from healthy sides.

        ``blockNumber`` and ``syncStatus`` are only present when they could be
        fetched; a failure there does not fail the check.
        """
        node_healthy, pxe_healthy = await asyncio.gather(
            self.is_node_healthy(), self.is_pxe_healthy()
        )
        result: Dict[str, Any] = {"node": node_healthy, "pxe": pxe_healthy}

        if node_healthy:
            with suppress(AztecApiError):
                result["blockNumber"] = await self.get_block_number()

        if pxe_healthy:
            with suppress(AztecApiError):
                result["syncStatus"] = await self.get_sync_status()

        return result

    # Static data and configuration

    def get_available_example_contracts(self) -> List[str]:
        return list(EXAMPLE_CONTRACTS)

    def get_urls(self) -> Dict[str, str]:
        return {"pxe": self._pxe_url, "node": self._node_url, "l1": self._l1_rpc_url}

    def set_urls(self, update: UrlUpdate) -> None:
        if update.pxe:
            self._pxe_url = update.pxe
        if update.node:
            self._node_url = update.node
        if update.l1:
            self._l1_rpc_url = update.l1


default_client = AztecClient()
