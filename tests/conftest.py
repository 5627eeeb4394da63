import boa
import pytest

from script.deploy import deploy_raffle
from script.deploy_mocks import deploy_mocks
from script.helper_config import build_deployment_plan

NETWORK_NAME = "pyevm"
STARTING_BALANCE = 10**18  # 1 ETH

# first anvil dev account
DEPLOYER_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture(autouse=True)
def isolation():
    """Roll the chain back after every test"""
    with boa.env.anchor():
        yield


@pytest.fixture(scope="session")
def plan():
    """Deployment plan for the in-memory chain"""
    return build_deployment_plan(NETWORK_NAME)


@pytest.fixture
def vrf_coordinator():
    return deploy_mocks(NETWORK_NAME)


@pytest.fixture
def raffle_contract(plan, vrf_coordinator):
    return deploy_raffle(plan, vrf_coordinator)


@pytest.fixture
def player():
    address = boa.env.generate_address("player")
    boa.env.set_balance(address, STARTING_BALANCE)
    return address


@pytest.fixture
def players():
    addresses = [boa.env.generate_address(f"player{i}") for i in range(3)]
    for address in addresses:
        boa.env.set_balance(address, STARTING_BALANCE)
    return addresses


@pytest.fixture
def raffle_entered(raffle_contract, player):
    """Raffle with one player in it and the interval already passed"""
    with boa.env.prank(player):
        raffle_contract.enter_raffle(value=raffle_contract.get_entrance_fee())
    boa.env.time_travel(seconds=raffle_contract.get_interval() + 1)
    return raffle_contract


@pytest.fixture
def deployer_key(monkeypatch):
    """PRIVATE_KEY for live-network code paths; the default EOA comes back afterwards"""
    monkeypatch.setenv("PRIVATE_KEY", DEPLOYER_KEY)
    monkeypatch.setattr(boa.env, "eoa", boa.env.eoa)
    return DEPLOYER_ADDRESS
