import os

import boa
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deploy import deploy_raffle
from script.deploy_mocks import deploy_mocks
from script.helper_config import build_deployment_plan, get_account, is_development_chain
from src import raffle

RAFFLE_ADDRESS_ENV = "RAFFLE_ADDRESS"


def enter_raffle(raffle_contract: VyperContract, account=None, extra: int = 0):
    if account is None:
        account = get_account()
    value = raffle_contract.get_entrance_fee() + extra
    with boa.env.prank(account):
        raffle_contract.enter_raffle(value=value)
    print(f"{account} entered the raffle with {value}")


def draw_winner(raffle_contract: VyperContract, coordinator: VyperContract, network_name=None) -> str:
    """Run a full draw against the mock coordinator and return the winner.

    Only meaningful locally: on a live chain the automation and VRF networks
    drive `performUpkeep` and the fulfilment themselves.
    """
    if network_name is None:
        network_name = get_active_network().name
    if not is_development_chain(network_name):
        raise ValueError(f"Cannot drive a draw by hand on {network_name!r}")

    boa.env.time_travel(seconds=raffle_contract.get_interval() + 1)
    raffle_contract.performUpkeep(b"")
    request_id = coordinator.last_request_id()
    coordinator.fulfillRandomWords(request_id, raffle_contract.address)

    winner = raffle_contract.get_recent_winner()
    print(f"The winner is {winner}")
    return winner


def run_interactions(network_name: str):
    """Enter a raffle and, locally, draw it.

    Development chains get a fresh mock and raffle every run. Live chains
    enter the deployment at RAFFLE_ADDRESS and leave the draw to the
    automation and VRF networks.
    """
    if is_development_chain(network_name):
        account = get_account(network_name)
        coordinator = deploy_mocks(network_name)
        raffle_contract = deploy_raffle(build_deployment_plan(network_name), coordinator)
        boa.env.set_balance(account, 10**18)
        enter_raffle(raffle_contract, account)
        return draw_winner(raffle_contract, coordinator, network_name)

    address = os.getenv(RAFFLE_ADDRESS_ENV)
    if not address:
        raise ValueError(f"Set {RAFFLE_ADDRESS_ENV} to the raffle deployed on {network_name!r}")
    raffle_contract = raffle.at(address)
    enter_raffle(raffle_contract, get_account(network_name))
    return None


def moccasin_main():
    return run_interactions(get_active_network().name)
