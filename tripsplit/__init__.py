"""Group expense splitting: balances and settle-up plans in minor units"""

from tripsplit.services.balance_service import BalanceService
from tripsplit.services.settlement_service import SettlementService
from tripsplit.services.split_strategies import distribute_equally

__version__ = "1.0.0"

compute_balances = BalanceService.compute_balances
plan_settlements = SettlementService.plan_settlements

__all__ = [
    "BalanceService",
    "SettlementService",
    "compute_balances",
    "distribute_equally",
    "plan_settlements",
]
