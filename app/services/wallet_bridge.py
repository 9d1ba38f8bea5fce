"""Wallet connection state over an injected browser wallet provider.

This is the client-side capability behind the dashboard's "Connect Wallet"
action. The server does not wire it in and wallet state does not gate NFT
generation; it lives here so the provider contract is typed and tested.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from pydantic import BaseModel

from app.models.enums import WalletEvent

logger = logging.getLogger(__name__)

UNRECOGNIZED_CHAIN = 4902


class WalletProviderError(RuntimeError):
    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code


class Subscription(Protocol):
    def unsubscribe(self) -> None: ...


class WalletProvider(Protocol):
    def request(self, method: str, params: Optional[List[Any]] = None) -> Any: ...

    def subscribe(self, event: str, callback: Callable[[Any], None]) -> Subscription: ...


class NetworkParams(BaseModel):
    chain_id: str
    chain_name: str
    rpc_urls: List[str]
    block_explorer_urls: List[str]
    currency_name: str
    currency_symbol: str
    currency_decimals: int = 18

    def as_add_chain_params(self) -> Dict[str, Any]:
        return {
            "chainId": self.chain_id,
            "chainName": self.chain_name,
            "rpcUrls": self.rpc_urls,
            "blockExplorerUrls": self.block_explorer_urls,
            "nativeCurrency": {
                "name": self.currency_name,
                "symbol": self.currency_symbol,
                "decimals": self.currency_decimals,
            },
        }


AVALANCHE_FUJI = NetworkParams(
    chain_id="0xa869",
    chain_name="Avalanche Fuji C-Chain",
    rpc_urls=["https://api.avax-test.network/ext/bc/C/rpc"],
    block_explorer_urls=["https://testnet.snowtrace.io"],
    currency_name="Avalanche",
    currency_symbol="AVAX",
)


class WalletBridge:
    """Connection state over an injected wallet provider.

    Use as a context manager: subscriptions taken on enter are always released
    on exit.
    """

    def __init__(self, provider: WalletProvider, network: NetworkParams = AVALANCHE_FUJI):
        self.provider = provider
        self.network = network
        self.address: Optional[str] = None
        self.chain_id: Optional[str] = None
        self.last_error: Optional[str] = None
        self._subscriptions: List[Subscription] = []

    def __enter__(self) -> "WalletBridge":
        self._subscriptions.append(
            self.provider.subscribe(WalletEvent.ACCOUNTS_CHANGED.value, self._on_accounts_changed))
        self._subscriptions.append(
            self.provider.subscribe(WalletEvent.CHAIN_CHANGED.value, self._on_chain_changed))
        return self

    def __exit__(self, exc_type, exc, tb):
        while self._subscriptions:
            self._subscriptions.pop().unsubscribe()
        return False

    @property
    def connected(self) -> bool:
        return self.address is not None

    def connect(self) -> Optional[str]:
        self.last_error = None
        try:
            accounts = self.provider.request("eth_requestAccounts")
            if not accounts:
                self.last_error = "No accounts returned by wallet"
                return None
            self._switch_network()
        except WalletProviderError as e:
            logger.warning("Wallet connect failed (%s): %s", e.code, e)
            self.last_error = str(e)
            self.address = None
            return None

        self.address = accounts[0]
        self.chain_id = self.network.chain_id
        return self.address

    def disconnect(self) -> None:
        self.address = None
        self.chain_id = None
        self.last_error = None

    def _switch_network(self) -> None:
        try:
            self.provider.request("wallet_switchEthereumChain", [{"chainId": self.network.chain_id}])
        except WalletProviderError as e:
            if e.code != UNRECOGNIZED_CHAIN:
                raise
            self.provider.request("wallet_addEthereumChain", [self.network.as_add_chain_params()])

    def _on_accounts_changed(self, accounts: List[str]) -> None:
        self.address = accounts[0] if accounts else None

    def _on_chain_changed(self, chain_id: str) -> None:
        self.chain_id = chain_id
        if chain_id != self.network.chain_id:
            self.last_error = f"Wrong network {chain_id}, expected {self.network.chain_id}"
