"""Configuration constants for forge-deployments library."""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Transaction types in a broadcast log that instantiate a contract
CREATION_TRANSACTION_TYPES = ("CREATE", "CREATE2")

# Storage layout entry guarding initializers (OpenZeppelin Initializable)
INITIALIZED_LABEL = "_initialized"
INITIALIZED_TYPES = ("t_uint8", "t_bool")

# OP Stack L2 predeploys, resolved when no in-run or persisted deployment exists
PREDEPLOYS = {
    "LegacyMessagePasser": "0x4200000000000000000000000000000000000000",
    "L2CrossDomainMessenger": "0x4200000000000000000000000000000000000007",
    "GasPriceOracle": "0x420000000000000000000000000000000000000F",
    "L2StandardBridge": "0x4200000000000000000000000000000000000010",
    "SequencerFeeWallet": "0x4200000000000000000000000000000000000011",
    "OptimismMintableERC20Factory": "0x4200000000000000000000000000000000000012",
    "L2ERC721Bridge": "0x4200000000000000000000000000000000000014",
    "L1Block": "0x4200000000000000000000000000000000000015",
    "L2ToL1MessagePasser": "0x4200000000000000000000000000000000000016",
    "OptimismMintableERC721Factory": "0x4200000000000000000000000000000000000017",
    "ProxyAdmin": "0x4200000000000000000000000000000000000018",
    "BaseFeeVault": "0x4200000000000000000000000000000000000019",
    "L1FeeVault": "0x420000000000000000000000000000000000001a",
    "SchemaRegistry": "0x4200000000000000000000000000000000000020",
    "EAS": "0x4200000000000000000000000000000000000021",
    "GovernanceToken": "0x4200000000000000000000000000000000000042",
}

# Deployment context used when DEPLOYMENT_CONTEXT is not set
CHAIN_CONTEXTS = {
    1: "mainnet",
    5: "goerli",
    10: "optimism-mainnet",
    420: "optimism-goerli",
    900: "devnetL1",
    1337: "devnetL1",
    31337: "hardhat",
    11155111: "sepolia",
    11155420: "optimism-sepolia",
}

DEFAULT_CONTEXT = "unknown"
DEFAULT_DEPLOY_SCRIPT = "Deploy"
DEFAULT_FORGE_ARTIFACTS_DIR = "forge-artifacts"

# File names inside a deployment context directory
LEDGER_FILENAME = ".deploy"
CHAIN_ID_FILENAME = ".chainId"
