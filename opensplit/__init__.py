"""Group expense balances and debt settlement."""

from .config import SettlementConfig
from .exceptions import ConfigError, InvalidExpenseError, OpenSplitError
from .models import Exchange, Expense, Group, SettlementResult, UserGroupBalance
from .settlement_optimizer import SettlementOptimizer, round_amount
from .user_balances import balances_by_group

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "Exchange",
    "Expense",
    "Group",
    "InvalidExpenseError",
    "OpenSplitError",
    "SettlementConfig",
    "SettlementOptimizer",
    "SettlementResult",
    "UserGroupBalance",
    "balances_by_group",
    "round_amount",
]
