from enum import Enum

class NodeKind(str, Enum):
    RECORD = "RECORD"
    BRANCH = "BRANCH"
    SKIP = "SKIP"

class WalletEvent(str, Enum):
    ACCOUNTS_CHANGED = "accountsChanged"
    CHAIN_CHANGED = "chainChanged"
