import os
from dataclasses import dataclass
from typing import Optional

import boa
from eth_account import Account
from moccasin.config import get_active_network

DEVELOPMENT_CHAINS = ["pyevm", "anvil", "localhost", "hardhat"]
LOCAL_CHAIN_ID = 31337

# Mock coordinator constructor args
BASE_FEE = 25 * 10**16  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas, scaled to the chain's gas price

FUND_AMOUNT = 2 * 10**18  # 2 LINK

EXPLORER_API_KEY_ENV = "ETHERSCAN_API_KEY"
SUBSCRIPTION_ID_ENV = "VRF_SUBSCRIPTION_ID"


class UnsupportedNetworkError(ValueError):
    pass


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    vrf_coordinator: Optional[str]
    subscription_id: int
    gas_lane: bytes
    interval: int
    entrance_fee: int
    callback_gas_limit: int


NETWORK_CONFIG = {
    LOCAL_CHAIN_ID: NetworkConfig(
        name="localhost",
        vrf_coordinator=None,
        subscription_id=588,
        gas_lane=bytes.fromhex(
            "474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
        ),
        interval=30,
        entrance_fee=10**16,  # 0.01 ETH
        callback_gas_limit=500_000,
    ),
    11155111: NetworkConfig(
        name="sepolia",
        vrf_coordinator="0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        subscription_id=588,
        gas_lane=bytes.fromhex(
            "474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
        ),
        interval=30,
        entrance_fee=10**16,
        callback_gas_limit=500_000,
    ),
}


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(chain_id: int) -> NetworkConfig:
    try:
        return NETWORK_CONFIG[chain_id]
    except KeyError:
        raise UnsupportedNetworkError(f"No raffle config for chain id {chain_id}")


@dataclass(frozen=True)
class DeploymentPlan:
    """Everything a deployment needs, settled before the first transaction.

    On development chains `vrf_coordinator` stays None and `subscription_id`
    is only a placeholder: both come from the mock at deploy time.
    """

    network_name: str
    chain_id: int
    use_mocks: bool
    vrf_coordinator: Optional[str]
    subscription_id: int
    gas_lane: bytes
    interval: int
    entrance_fee: int
    callback_gas_limit: int
    verify: bool

    def constructor_args(self, vrf_coordinator=None, subscription_id=None) -> list:
        if vrf_coordinator is None:
            vrf_coordinator = self.vrf_coordinator
        if subscription_id is None:
            subscription_id = self.subscription_id
        return [
            vrf_coordinator,
            subscription_id,
            self.gas_lane,
            self.interval,
            self.entrance_fee,
            self.callback_gas_limit,
        ]


def build_deployment_plan(
    network_name: str, chain_id: Optional[int] = None, api_key: Optional[str] = None
) -> DeploymentPlan:
    use_mocks = is_development_chain(network_name)
    if use_mocks:
        # pyevm reports chain id 1, so local runs are keyed by name instead
        chain_id = LOCAL_CHAIN_ID
    elif chain_id is None:
        raise UnsupportedNetworkError(f"Network {network_name!r} has no chain id")

    config = get_network_config(chain_id)
    if not use_mocks and config.vrf_coordinator is None:
        raise ValueError(f"Network {network_name!r} has no VRF coordinator configured")

    subscription_id = config.subscription_id
    if not use_mocks and os.getenv(SUBSCRIPTION_ID_ENV):
        subscription_id = int(os.environ[SUBSCRIPTION_ID_ENV])

    return DeploymentPlan(
        network_name=network_name,
        chain_id=chain_id,
        use_mocks=use_mocks,
        vrf_coordinator=None if use_mocks else config.vrf_coordinator,
        subscription_id=subscription_id,
        gas_lane=config.gas_lane,
        interval=config.interval,
        entrance_fee=config.entrance_fee,
        callback_gas_limit=config.callback_gas_limit,
        verify=not use_mocks and bool(api_key),
    )


def plan_for_active_network() -> DeploymentPlan:
    network = get_active_network()
    return build_deployment_plan(
        network.name, network.chain_id, os.getenv(EXPLORER_API_KEY_ENV)
    )


def get_account(network_name: Optional[str] = None):
    """Account that signs deployments on the given (default: active) network."""
    if network_name is None:
        network_name = get_active_network().name
    if is_development_chain(network_name):
        return boa.env.eoa
    private_key = os.getenv("PRIVATE_KEY")
    if private_key:
        account = Account.from_key(private_key)
        boa.env.add_account(account, force_eoa=True)
        return account.address
    return get_active_network().get_default_account().address
