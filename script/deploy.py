from typing import Optional

from moccasin.boa_tools import VyperContract

from script.deploy_mocks import deploy_mocks
from script.helper_config import (
    FUND_AMOUNT,
    DeploymentPlan,
    get_account,
    plan_for_active_network,
)
from script.verify import verify_if_configured
from src import raffle


def create_and_fund_subscription(coordinator: VyperContract, amount: int = FUND_AMOUNT) -> int:
    subscription_id = coordinator.createSubscription()
    coordinator.fundSubscription(subscription_id, amount)
    print(f"Created subscription {subscription_id} funded with {amount}")
    return subscription_id


def deploy_raffle(
    plan: Optional[DeploymentPlan] = None, coordinator: Optional[VyperContract] = None
) -> VyperContract:
    if plan is None:
        plan = plan_for_active_network()

    if plan.use_mocks:
        if coordinator is None:
            coordinator = deploy_mocks(plan.network_name)
        vrf_coordinator = coordinator.address
        subscription_id = create_and_fund_subscription(coordinator)
    else:
        # registers PRIVATE_KEY as boa.env.eoa before the first transaction
        print(f"Deploying from {get_account(plan.network_name)}")
        vrf_coordinator = plan.vrf_coordinator
        subscription_id = plan.subscription_id

    raffle_contract = raffle.deploy(*plan.constructor_args(vrf_coordinator, subscription_id))
    print(f"Raffle deployed at: {raffle_contract.address}")

    if plan.use_mocks:
        coordinator.addConsumer(subscription_id, raffle_contract.address)
        print(f"Added raffle as consumer of subscription {subscription_id}")
    else:
        print(f"Add {raffle_contract.address} as a consumer of subscription {subscription_id}")

    verify_if_configured(raffle_contract, plan)
    return raffle_contract


def moccasin_main() -> VyperContract:
    return deploy_raffle()
