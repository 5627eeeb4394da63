from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.helper_config import DeploymentPlan


def verify(contract: VyperContract, network=None):
    """Submit the contract source to the network's block explorer and wait."""
    if network is None:
        network = get_active_network()
    print("Verifying contract...")
    result = network.moccasin_verify(contract)
    result.wait_for_verification()
    print(f"Verified {contract.address} on {network.name}")
    return result


def verify_if_configured(contract: VyperContract, plan: DeploymentPlan, network=None) -> bool:
    # plan.verify is only set off the development chains with an API key present
    if not plan.verify:
        return False
    verify(contract, network)
    return True
