from typing import Optional

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.helper_config import BASE_FEE, GAS_PRICE_LINK, is_development_chain
from src.mocks import vrf_coordinator_v2_mock


def deploy_mocks(network_name: str) -> Optional[VyperContract]:
    if not is_development_chain(network_name):
        return None
    print("Local network detected - using mocks")
    mock = vrf_coordinator_v2_mock.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"Mock VRF Coordinator at: {mock.address}")
    print("----------------------------------------------------")
    return mock


def moccasin_main() -> Optional[VyperContract]:
    return deploy_mocks(get_active_network().name)
