"""
Static catalog of the tools exposed to MCP hosts.

Descriptors are purely declarative: a name, a description, and a JSON-schema
object describing the arguments. Behaviour lives in ``aztec_mcp.mcp``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

ACCOUNT_TYPES = ["schnorr", "ecdsasecp256r1", "ecdsasecp256r1ssh", "ecdsasecp256k1"]
SEQUENCER_COMMANDS = ["list", "who-next"]


def _object_schema(
    properties: Optional[Dict[str, Any]] = None, required: Sequence[str] = ()
) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties or {},
        "required": list(required),
    }


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _boolean(description: str, default: Optional[bool] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "boolean", "description": description}
    if default is not None:
        schema["default"] = default
    return schema


def _string_list(description: str, *, with_default: bool = True) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "array",
        "description": description,
        "items": {"type": "string"},
    }
    if with_default:
        schema["default"] = []
    return schema


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


NETWORK_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_get_node_info",
        description=(
            "Get comprehensive information about the Aztec node including version, "
            "L1 chain ID, protocol version, and contract addresses"
        ),
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_get_block_number",
        description="Get the current Aztec L2 block number",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_get_block",
        description="Get detailed block information by block number. Returns latest block if no number specified",
        input_schema=_object_schema(
            {"blockNumber": _number("Block number to fetch. Leave empty for latest block")}
        ),
    ),
    ToolDescriptor(
        name="aztec_get_current_base_fee",
        description="Get the current base fee for DA (Data Availability) and L2 gas",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_get_logs",
        description="Get public logs filtered by transaction hash, block range, or contract address",
        input_schema=_object_schema(
            {
                "txHash": _string("Filter by transaction hash"),
                "fromBlock": _number("Start block number (default: 1)"),
                "toBlock": _number("End block number (default: latest)"),
                "contractAddress": _string("Filter by contract address"),
            }
        ),
    ),
    ToolDescriptor(
        name="aztec_get_l1_contract_addresses",
        description=(
            "Get all L1 contract addresses including rollup, registry, inbox, outbox, "
            "fee juice, and governance contracts"
        ),
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_get_protocol_contract_addresses",
        description=(
            "Get Aztec protocol contract addresses including class registerer, "
            "fee juice, instance deployer"
        ),
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_health_check",
        description="Check the health status of Aztec node and PXE, including sync status",
        input_schema=_object_schema(),
    ),
]

ACCOUNT_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_get_accounts",
        description="List all registered accounts in the PXE",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_create_account",
        description=(
            "Create a new Aztec account. Supports multiple account types: schnorr (default), "
            "ecdsasecp256r1, ecdsasecp256r1ssh, ecdsasecp256k1"
        ),
        input_schema=_object_schema(
            {
                "type": {
                    "type": "string",
                    "description": "Account type",
                    "enum": ACCOUNT_TYPES,
                    "default": "schnorr",
                },
                "alias": _string("Alias for the account (for easy reference)"),
                "secretKey": _string("Optional secret key. Random if not provided"),
                "publicDeploy": _boolean(
                    "Whether to publicly deploy the account contract", default=False
                ),
            }
        ),
    ),
    ToolDescriptor(
        name="aztec_deploy_account",
        description="Deploy an already registered Aztec account contract",
        input_schema=_object_schema(
            {
                "address": _string("Address of the registered account to deploy"),
                "skipInitialization": _boolean("Skip contract initialization", default=False),
            },
            required=["address"],
        ),
    ),
    ToolDescriptor(
        name="aztec_register_sender",
        description="Register a sender address for note syncing. Required to receive notes from this address",
        input_schema=_object_schema(
            {"address": _string("Sender address to register")}, required=["address"]
        ),
    ),
    ToolDescriptor(
        name="aztec_get_account_public_key",
        description="Get the public key for a registered account",
        input_schema=_object_schema({"address": _string("Account address")}, required=["address"]),
    ),
    ToolDescriptor(
        name="aztec_import_test_accounts",
        description="Import pre-funded test accounts from the sandbox/devnet",
        input_schema=_object_schema(),
    ),
]

CONTRACT_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_deploy_contract",
        description="Deploy a compiled Noir contract to Aztec. Requires contract artifact and deployer account",
        input_schema=_object_schema(
            {
                "artifact": _string(
                    "Contract artifact name (e.g., TokenContract) or path to compiled JSON"
                ),
                "args": _string_list("Constructor arguments"),
                "from": _string("Deployer account address or alias"),
                "alias": _string("Alias for the deployed contract"),
                "salt": _string("Deployment salt for deterministic addresses"),
                "publicDeploy": _boolean("Publish the contract publicly", default=False),
            },
            required=["artifact", "from"],
        ),
    ),
    ToolDescriptor(
        name="aztec_register_contract",
        description="Register an existing contract in the PXE to interact with it",
        input_schema=_object_schema(
            {
                "address": _string("Contract address to register"),
                "artifact": _string("Contract artifact name or path"),
                "alias": _string("Alias for easy reference"),
                "publicKey": _string("Encryption public key (for contracts receiving private notes)"),
            },
            required=["address", "artifact"],
        ),
    ),
    ToolDescriptor(
        name="aztec_get_contract_info",
        description="Get information about a deployed contract including class ID, deployer, and public keys",
        input_schema=_object_schema({"address": _string("Contract address")}, required=["address"]),
    ),
    ToolDescriptor(
        name="aztec_inspect_contract",
        description="List all external callable functions for a contract artifact",
        input_schema=_object_schema(
            {"artifact": _string("Contract artifact name or path to JSON file")},
            required=["artifact"],
        ),
    ),
    ToolDescriptor(
        name="aztec_list_example_contracts",
        description="List all available example contracts from @aztec/noir-contracts.js",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_compute_selector",
        description="Compute the function selector for a given function signature",
        input_schema=_object_schema(
            {"functionSignature": _string("Function signature (e.g., 'transfer(Field,Field)')")},
            required=["functionSignature"],
        ),
    ),
    ToolDescriptor(
        name="aztec_is_contract_deployed",
        description="Check if a contract is publicly deployed on the network",
        input_schema=_object_schema(
            {"address": _string("Contract address to check")}, required=["address"]
        ),
    ),
]

TRANSACTION_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_send_transaction",
        description="Send a transaction by calling a function on an Aztec contract (private or public)",
        input_schema=_object_schema(
            {
                "contractAddress": _string("Contract address to call"),
                "functionName": _string("Function name to call"),
                "args": _string_list("Function arguments"),
                "from": _string("Sender account address or alias"),
                "authWitnesses": _string_list(
                    "Authorization witnesses for delegated calls", with_default=False
                ),
            },
            required=["contractAddress", "functionName", "from"],
        ),
    ),
    ToolDescriptor(
        name="aztec_simulate_transaction",
        description="Simulate a transaction without executing it. Returns gas estimation and potential errors",
        input_schema=_object_schema(
            {
                "contractAddress": _string("Contract address"),
                "functionName": _string("Function name"),
                "args": _string_list("Function arguments"),
                "from": _string("Sender account address or alias"),
            },
            required=["contractAddress", "functionName", "from"],
        ),
    ),
    ToolDescriptor(
        name="aztec_get_transaction_receipt",
        description="Get the receipt for a transaction including status, block number, and fees",
        input_schema=_object_schema({"txHash": _string("Transaction hash")}, required=["txHash"]),
    ),
    ToolDescriptor(
        name="aztec_get_pending_transactions",
        description="List all pending transactions in the PXE mempool",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_estimate_gas",
        description="Estimate gas costs for a transaction",
        input_schema=_object_schema(
            {
                "contractAddress": _string("Contract address"),
                "functionName": _string("Function name"),
                "args": _string_list("Function arguments"),
                "from": _string("Sender account"),
            },
            required=["contractAddress", "functionName", "from"],
        ),
    ),
    ToolDescriptor(
        name="aztec_create_authwit",
        description="Create an authorization witness for delegated actions (private auth)",
        input_schema=_object_schema(
            {
                "functionName": _string("Function to authorize"),
                "caller": _string("Address authorized to call"),
                "contractAddress": _string("Contract address"),
                "args": _string_list("Function arguments", with_default=False),
                "from": _string("Account creating the authwit"),
            },
            required=["functionName", "caller", "contractAddress", "from"],
        ),
    ),
    ToolDescriptor(
        name="aztec_authorize_action",
        description="Authorize a public call on behalf of an account (public auth)",
        input_schema=_object_schema(
            {
                "functionName": _string("Function to authorize"),
                "caller": _string("Address authorized to call"),
                "contractAddress": _string("Contract address"),
                "from": _string("Account authorizing the action"),
            },
            required=["functionName", "caller", "contractAddress", "from"],
        ),
    ),
]

BRIDGE_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_bridge_erc20",
        description="Bridge ERC20 tokens from L1 Ethereum to Aztec L2",
        input_schema=_object_schema(
            {
                "amount": _string("Amount to bridge"),
                "recipient": _string("Aztec L2 recipient address"),
                "tokenAddress": _string("L1 ERC20 token address"),
                "portalAddress": _string("L1 portal contract address"),
                "mint": _boolean("Mint tokens on L1 first (testnet only)", default=False),
                "private": _boolean("Use private bridging flow", default=False),
            },
            required=["amount", "recipient"],
        ),
    ),
    ToolDescriptor(
        name="aztec_get_l1_balance",
        description="Get ERC20 token balance on L1 Ethereum for an address",
        input_schema=_object_schema(
            {
                "address": _string("Ethereum address to check"),
                "tokenAddress": _string("ERC20 token address"),
            },
            required=["address", "tokenAddress"],
        ),
    ),
    ToolDescriptor(
        name="aztec_get_l1_to_l2_message_witness",
        description="Get the witness for claiming an L1 to L2 message on Aztec",
        input_schema=_object_schema(
            {
                "contractAddress": _string("Aztec contract address"),
                "messageHash": _string("L1 to L2 message hash"),
                "secret": _string("Secret for claiming"),
            },
            required=["contractAddress", "messageHash", "secret"],
        ),
    ),
    ToolDescriptor(
        name="aztec_deploy_l1_contracts",
        description="Deploy all L1 infrastructure contracts for a new Aztec network (admin only)",
        input_schema=_object_schema(
            {
                "privateKey": _string("L1 deployer private key"),
                "mnemonic": _string("L1 deployer mnemonic (alternative to privateKey)"),
                "testAccounts": _boolean("Initialize test accounts with fee juice", default=False),
                "sponsoredFpc": _boolean("Deploy sponsored FPC contract", default=False),
            }
        ),
    ),
    ToolDescriptor(
        name="aztec_get_canonical_fpc_address",
        description="Get the canonical SponsoredFPC address for the current network version",
        input_schema=_object_schema(),
    ),
]

VALIDATOR_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_add_validator",
        description="Add a validator to the L1 rollup contract via direct deposit",
        input_schema=_object_schema(
            {
                "attester": _string("Ethereum address of the attester"),
                "withdrawer": _string("Ethereum address of the withdrawer"),
                "blsSecretKey": _string("BN254 scalar field element for BLS signatures"),
                "privateKey": _string("L1 private key for the transaction"),
            },
            required=["attester", "withdrawer", "blsSecretKey"],
        ),
    ),
    ToolDescriptor(
        name="aztec_remove_validator",
        description="Remove a validator from the L1 rollup contract",
        input_schema=_object_schema(
            {
                "validator": _string("Validator address to remove"),
                "privateKey": _string("L1 private key with permission"),
            },
            required=["validator"],
        ),
    ),
    ToolDescriptor(
        name="aztec_get_sequencers",
        description="List registered sequencers on the L1 rollup contract",
        input_schema=_object_schema(
            {
                "command": {
                    "type": "string",
                    "description": "Command: list, who-next",
                    "enum": SEQUENCER_COMMANDS,
                    "default": "list",
                },
                "blockNumber": _number("Block number to query next sequencer for"),
            }
        ),
    ),
    ToolDescriptor(
        name="aztec_advance_epoch",
        description="Use L1 cheat codes to warp time to the next epoch (devnet/sandbox only)",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_prune_rollup",
        description="Prune the pending chain on the rollup contract",
        input_schema=_object_schema(
            {
                "rollupAddress": _string("Rollup contract address"),
                "privateKey": _string("L1 private key with permission"),
            }
        ),
    ),
]

GOVERNANCE_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_deposit_governance_tokens",
        description="Deposit governance tokens to participate in voting",
        input_schema=_object_schema(
            {
                "amount": _string("Amount of tokens to deposit"),
                "recipient": _string("Recipient of voting power"),
                "mint": _boolean("Mint tokens first (testnet only)", default=False),
                "privateKey": _string("L1 private key"),
            },
            required=["amount"],
        ),
    ),
    ToolDescriptor(
        name="aztec_propose_governance",
        description="Create a governance proposal with token lock",
        input_schema=_object_schema(
            {
                "payloadAddress": _string("Address of the payload contract"),
                "privateKey": _string("L1 private key"),
            },
            required=["payloadAddress"],
        ),
    ),
    ToolDescriptor(
        name="aztec_vote_on_proposal",
        description="Vote on a governance proposal",
        input_schema=_object_schema(
            {
                "proposalId": _string("Proposal ID to vote on"),
                "voteAmount": _string("Amount of voting power to use"),
                "inFavor": _boolean("Vote in favor (true) or against (false)"),
                "privateKey": _string("L1 private key"),
            },
            required=["proposalId", "voteAmount", "inFavor"],
        ),
    ),
    ToolDescriptor(
        name="aztec_execute_proposal",
        description="Execute a passed governance proposal",
        input_schema=_object_schema(
            {
                "proposalId": _string("Proposal ID to execute"),
                "wait": _boolean("Wait until proposal is executable", default=False),
                "privateKey": _string("L1 private key"),
            },
            required=["proposalId"],
        ),
    ),
]

CRYPTO_TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="aztec_generate_keys",
        description="Generate a new encryption and signing key pair for Aztec accounts",
        input_schema=_object_schema({"json": _boolean("Output in JSON format", default=True)}),
    ),
    ToolDescriptor(
        name="aztec_generate_secret_and_hash",
        description="Generate an arbitrary secret (Fr field element) and its hash using Aztec defaults",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_generate_bls_keypair",
        description="Generate a BLS keypair for validator operations",
        input_schema=_object_schema(
            {
                "mnemonic": _string("Mnemonic for BLS derivation"),
                "ikm": _string("Initial keying material (alternative to mnemonic)"),
                "blsPath": _string("EIP-2334 path (default: m/12381/3600/0/0/0)"),
                "compressed": _boolean("Output compressed public key", default=False),
            }
        ),
    ),
    ToolDescriptor(
        name="aztec_generate_p2p_key",
        description="Generate a LibP2P peer private key for P2P networking",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name="aztec_generate_l1_account",
        description="Generate a new Ethereum L1 account (private key and address)",
        input_schema=_object_schema({"json": _boolean("Output in JSON format", default=True)}),
    ),
]

_CATEGORY_LISTS: Tuple[Tuple[str, List[ToolDescriptor]], ...] = (
    ("network", NETWORK_TOOLS),
    ("account", ACCOUNT_TOOLS),
    ("contract", CONTRACT_TOOLS),
    ("transaction", TRANSACTION_TOOLS),
    ("bridge", BRIDGE_TOOLS),
    ("validator", VALIDATOR_TOOLS),
    ("governance", GOVERNANCE_TOOLS),
    ("crypto", CRYPTO_TOOLS),
)

TOOLS: List[ToolDescriptor] = [tool for _, tools in _CATEGORY_LISTS for tool in tools]

TOOL_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    category: tuple(tool.name for tool in tools) for category, tools in _CATEGORY_LISTS
}

TOOL_COUNT = len(TOOLS)

_TOOLS_BY_NAME: Dict[str, ToolDescriptor] = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> Optional[ToolDescriptor]:
    """Look up a descriptor by exact name."""
    return _TOOLS_BY_NAME.get(name)
