"""Markdown guides served as MCP resources."""

GETTING_STARTED = """# Getting Started with Aztec

Aztec is a privacy-first zkRollup on Ethereum. Contracts are written in Noir
and can hold both private and public state.

## Install the toolchain

```bash
bash -i <(curl -s https://install.aztec.network)
aztec-up
```

## Start a local sandbox

```bash
aztec start --sandbox
```

The sandbox runs an Aztec node, a PXE (Private Execution Environment) and a
local Ethereum devnet. By default the PXE and node answer on
`http://localhost:8080` and the L1 node on `http://localhost:8545`.

## Create and use an account

```bash
aztec-wallet import-test-accounts
aztec-wallet create-account -t schnorr -a alice
aztec-wallet deploy TokenContract --from alice --args alice Token TKN 18 -a token
aztec-wallet send mint_to_private -ca token -f alice --args alice 100
```

## Configure this server

| Variable | Purpose | Default |
|---|---|---|
| `AZTEC_PXE_URL` / `PXE_URL` | PXE endpoint | `http://localhost:8080` |
| `AZTEC_NODE_URL` | Node endpoint | `http://localhost:8080` |
| `ETHEREUM_HOST` / `L1_RPC_URL` | L1 endpoint | `http://localhost:8545` |
"""

NOIR_CONTRACTS = """# Noir Contract Development

## Project layout

```bash
aztec-nargo new --contract counter
cd counter
aztec-nargo compile
aztec codegen target -o src/artifacts
```

## Anatomy of a contract

```rust
use dep::aztec::macros::aztec;

#[aztec]
contract Counter {
    #[storage]
    struct Storage<Context> { counters: Map<AztecAddress, EasyPrivateUint<Context>, Context> }

    #[initializer]
    #[private]
    fn initialize(headstart: u64, owner: AztecAddress) { /* ... */ }

    #[private]
    fn increment(owner: AztecAddress) { /* ... */ }

    #[utility]
    unconstrained fn get_counter(owner: AztecAddress) -> Field { /* ... */ }
}
```

* `#[private]` functions run client-side in the PXE and produce proofs.
* `#[public]` functions run on the sequencer against public state.
* `#[utility]` functions are unconstrained reads that never produce a transaction.

## Deploying

```bash
aztec-wallet deploy ./target/counter-Counter.json --from alice --args 0 alice -a counter
aztec inspect-contract ./target/counter-Counter.json
```
"""

PRIVACY_PATTERNS = """# Privacy Patterns

## Notes and nullifiers

Private state lives in encrypted notes. Spending a note emits a nullifier, so
observers learn that *some* note was consumed but not which one.

## Keep public and private flows separate

* Move value into private balances as early as possible.
* Avoid reading public state from private functions when the read leaks intent.
* Enqueue public calls from private functions only when necessary; the call
  and its arguments are public.

## Authorization witnesses

Delegated actions use authwits instead of allowances:

```bash
aztec-wallet create-authwit transfer_in_private bob -ca token -f alice --args alice bob 10 0
aztec-wallet authorize-action transfer_in_public bob -ca token -f alice
```

## Register senders

A PXE only discovers notes from senders it knows about:

```bash
aztec-wallet register-sender <address>
```
"""

ACCOUNTS = """# Account Abstraction

Every Aztec account is a contract. The account contract decides how
transactions are authorized.

## Built-in account types

| Type | Signature scheme |
|---|---|
| `schnorr` | Schnorr over Grumpkin (default) |
| `ecdsasecp256r1` | ECDSA over secp256r1 |
| `ecdsasecp256r1ssh` | secp256r1 keys held by an SSH agent |
| `ecdsasecp256k1` | ECDSA over secp256k1 |

## Lifecycle

1. Create: `aztec-wallet create-account -t schnorr -a alice`
2. Register only: `aztec-wallet create-account -t schnorr -a alice --register-only`
3. Deploy later: `aztec-wallet deploy-account <address>`

## Fees

Accounts pay fees in Fee Juice. On testnets a sponsored FPC can pay instead:

```bash
aztec get-canonical-sponsored-fpc-address
```
"""

BRIDGING = """# L1-L2 Bridging

## Depositing tokens

```bash
aztec bridge-erc20 1000 <aztec-address> -t <l1-token> -p <portal> --mint --private
```

The bridge command returns a claim secret and message hash. The L2 claim can
only happen once the message is included in an L2 block.

## Claiming

Fetch the membership witness for the message, then call the bridge contract's
claim function with the secret:

```bash
aztec-wallet send claim_private -ca bridge -f alice --args <recipient> <amount> <secret> <index>
```

## Withdrawing

Withdrawals burn on L2 and create an L2-to-L1 message that is consumed on the
L1 portal after the epoch is proven.

## Checking balances

```bash
aztec get-l1-balance <eth-address> -t <l1-token>
```
"""

CLI_REFERENCE = """# CLI Quick Reference

## aztec-wallet

| Command | Purpose |
|---|---|
| `create-account -t <type> -a <alias>` | Create an account |
| `deploy-account <address>` | Deploy a registered account |
| `import-test-accounts` | Import sandbox test accounts |
| `deploy <artifact> --from <acct> --args ...` | Deploy a contract |
| `register-contract <address> <artifact>` | Register an existing contract |
| `send <fn> -ca <contract> -f <acct> --args ...` | Send a transaction |
| `simulate <fn> -ca <contract> -f <acct>` | Simulate a call |
| `create-authwit <fn> <caller> -ca <contract> -f <acct>` | Private authwit |
| `authorize-action <fn> <caller> -ca <contract> -f <acct>` | Public authwit |
| `register-sender <address>` | Discover notes from a sender |

## aztec

| Command | Purpose |
|---|---|
| `start --sandbox` | Run a local sandbox |
| `inspect-contract <artifact>` | List callable functions |
| `compute-selector "<signature>"` | Compute a function selector |
| `bridge-erc20 <amount> <recipient>` | Bridge from L1 |
| `deploy-l1-contracts` | Deploy L1 infrastructure |
| `add-l1-validator` / `remove-l1-validator` | Manage validators |
| `sequencers list` / `sequencers who-next` | Inspect sequencers |
| `generate-keys`, `generate-bls-keypair`, `generate-l1-account` | Key material |

## Gas Options

```bash
--gas-limits da=100,l2=100,teardownDA=10,teardownL2=10
--max-fees-per-gas da=100,l2=100
```
"""
