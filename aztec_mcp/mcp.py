"""
Name-keyed dispatch from MCP tool calls to their implementations.

Every catalog entry maps to exactly one handler. Handlers come in two kinds:
``LiveCall`` runs against the Aztec client, ``InstructionSynthesis`` returns a
ready-to-run CLI command without touching the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from aztec_mcp.aztec_api import AztecClient, default_client
from aztec_mcp.catalog import TOOLS
from aztec_mcp.tools import (
    account,
    bridge,
    contract,
    crypto,
    governance,
    network,
    transaction,
    validator,
)

Arguments = Mapping[str, Any]


class UnknownToolError(LookupError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


@dataclass(frozen=True, slots=True)
class LiveCall:
    handler: Callable[[AztecClient, Arguments], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class InstructionSynthesis:
    template: Callable[[Arguments], Dict[str, Any]]


ToolHandler = Union[LiveCall, InstructionSynthesis]


TOOL_HANDLERS: Dict[str, ToolHandler] = {
    # network
    "aztec_get_node_info": LiveCall(network.get_node_info),
    "aztec_get_block_number": LiveCall(network.get_block_number),
    "aztec_get_block": LiveCall(network.get_block),
    "aztec_get_current_base_fee": LiveCall(network.get_current_base_fee),
    "aztec_get_logs": LiveCall(network.get_logs),
    "aztec_get_l1_contract_addresses": LiveCall(network.get_l1_contract_addresses),
    "aztec_get_protocol_contract_addresses": LiveCall(network.get_protocol_contract_addresses),
    "aztec_health_check": LiveCall(network.health_check),
    # account
    "aztec_get_accounts": LiveCall(account.get_accounts),
    "aztec_create_account": InstructionSynthesis(account.create_account),
    "aztec_deploy_account": InstructionSynthesis(account.deploy_account),
    "aztec_register_sender": LiveCall(account.register_sender),
    "aztec_get_account_public_key": LiveCall(account.get_account_public_key),
    "aztec_import_test_accounts": InstructionSynthesis(account.import_test_accounts),
    # contract
    "aztec_deploy_contract": InstructionSynthesis(contract.deploy_contract),
    "aztec_register_contract": InstructionSynthesis(contract.register_contract),
    "aztec_get_contract_info": LiveCall(contract.get_contract_info),
    "aztec_inspect_contract": InstructionSynthesis(contract.inspect_contract),
    "aztec_list_example_contracts": LiveCall(contract.list_example_contracts),
    "aztec_compute_selector": InstructionSynthesis(contract.compute_selector),
    "aztec_is_contract_deployed": LiveCall(contract.is_contract_deployed),
    # transaction
    "aztec_send_transaction": InstructionSynthesis(transaction.send_transaction),
    "aztec_simulate_transaction": InstructionSynthesis(transaction.simulate_transaction),
    "aztec_get_transaction_receipt": LiveCall(transaction.get_transaction_receipt),
    "aztec_get_pending_transactions": LiveCall(transaction.get_pending_transactions),
    "aztec_estimate_gas": InstructionSynthesis(transaction.estimate_gas),
    "aztec_create_authwit": InstructionSynthesis(transaction.create_authwit),
    "aztec_authorize_action": InstructionSynthesis(transaction.authorize_action),
    # bridge
    "aztec_bridge_erc20": InstructionSynthesis(bridge.bridge_erc20),
    "aztec_get_l1_balance": InstructionSynthesis(bridge.get_l1_balance),
    "aztec_get_l1_to_l2_message_witness": LiveCall(bridge.get_l1_to_l2_message_witness),
    "aztec_deploy_l1_contracts": InstructionSynthesis(bridge.deploy_l1_contracts),
    "aztec_get_canonical_fpc_address": InstructionSynthesis(bridge.get_canonical_fpc_address),
    # validator
    "aztec_add_validator": InstructionSynthesis(validator.add_validator),
    "aztec_remove_validator": InstructionSynthesis(validator.remove_validator),
    "aztec_get_sequencers": InstructionSynthesis(validator.get_sequencers),
    "aztec_advance_epoch": InstructionSynthesis(validator.advance_epoch),
    "aztec_prune_rollup": InstructionSynthesis(validator.prune_rollup),
    # governance
    "aztec_deposit_governance_tokens": InstructionSynthesis(governance.deposit_governance_tokens),
    "aztec_propose_governance": InstructionSynthesis(governance.propose_governance),
    "aztec_vote_on_proposal": InstructionSynthesis(governance.vote_on_proposal),
    "aztec_execute_proposal": InstructionSynthesis(governance.execute_proposal),
    # crypto
    "aztec_generate_keys": InstructionSynthesis(crypto.generate_keys),
    "aztec_generate_secret_and_hash": InstructionSynthesis(crypto.generate_secret_and_hash),
    "aztec_generate_bls_keypair": InstructionSynthesis(crypto.generate_bls_keypair),
    "aztec_generate_p2p_key": InstructionSynthesis(crypto.generate_p2p_key),
    "aztec_generate_l1_account": InstructionSynthesis(crypto.generate_l1_account),
}


def list_tools() -> List[Dict[str, Any]]:
    """Return tool descriptors in catalog order."""
    return [tool.to_dict() for tool in TOOLS]


async def handle_tool_call(
    name: str,
    args: Optional[Arguments] = None,
    client: AztecClient = default_client,
) -> Any:
    """
    Dispatch one tool call by name.

    Arguments are assumed to have been validated against the tool's
    inputSchema by the host. Client errors from live calls propagate
    unchanged.

    Raises:
        UnknownToolError: ``name`` is not in the catalog.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)
    args = args or {}
    if isinstance(handler, LiveCall):
        return await handler.handler(client, args)
    return handler.template(args)
