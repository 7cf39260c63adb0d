import logging
from bisect import insort
from typing import Dict, List, Optional

from .config import SettlementConfig
from .exceptions import InvalidExpenseError
from .models import Exchange, Expense, Group, SettlementResult

logger = logging.getLogger(__name__)

NAIVE = "naive"
GREEDY = "greedy"


def round_amount(amount: float, decimals: int = 2) -> float:
    """Round an amount to the currency minor unit"""
    return round(amount, decimals)


def split_share(expense: Expense) -> float:
    if not expense.receivers:
        raise InvalidExpenseError(f"Expense {expense.name!r} has no receivers to split {expense.amount} between")
    return expense.amount / len(expense.receivers)


class SettlementOptimizer:
    @staticmethod
    def calculate_balances(expenses: List[Expense]) -> Dict[str, float]:
        """Calculate net balance for each user, positive means they are owed money"""
        balances = {}

        for expense in expenses:
            share = split_share(expense)

            # Update payer's balance
            balances[expense.payer] = balances.get(expense.payer, 0.0) + expense.amount

            # Update receivers' balances, a repeated nick takes one share per entry
            for receiver in expense.receivers:
                balances[receiver] = balances.get(receiver, 0.0) - share

        return balances

    @staticmethod
    def naive_exchanges(expenses: List[Expense], config: Optional[SettlementConfig] = None) -> List[Exchange]:
        """Exchanges needed if only debts between the same two people cancel out"""
        config = config or SettlementConfig()
        balances_between_people = {}

        for expense in expenses:
            share = split_share(expense)
            for receiver in expense.receivers:
                if receiver == expense.payer:
                    continue

                # Pairs are stored in alphabetical order so both directions
                # of a debt land on the same key
                if expense.payer < receiver:
                    pair, amount = (expense.payer, receiver), share
                else:
                    pair, amount = (receiver, expense.payer), -share

                balances_between_people[pair] = balances_between_people.get(pair, 0.0) + amount

        exchanges = []
        for (low, high), balance in sorted(balances_between_people.items()):
            amount = round_amount(abs(balance), config.decimals)
            if amount == 0:
                continue

            # A positive balance means low paid for high, so high pays back
            if balance > 0:
                payer, receiver = high, low
            else:
                payer, receiver = low, high

            exchanges.append(Exchange(payer=payer, receiver=receiver, amount=amount))

        return exchanges

    @staticmethod
    def minimize_transactions(balances: Dict[str, float], config: Optional[SettlementConfig] = None) -> List[Exchange]:
        """Settle the group by always matching the largest debtor with the largest creditor"""
        config = config or SettlementConfig()
        decimals = config.decimals

        # (magnitude, nick) pairs kept sorted ascending, the largest sits at the tail
        debtors = []
        creditors = []

        for user_id, balance in balances.items():
            balance = round_amount(balance, decimals)
            if balance < 0:
                debtors.append((-balance, user_id))
            elif balance > 0:
                creditors.append((balance, user_id))

        debtors.sort()
        creditors.sort()

        exchanges = []
        while debtors and creditors:
            debt, debtor = debtors.pop()
            credit, creditor = creditors.pop()

            if debt == credit:
                amount = debt
            elif credit > debt:
                amount = debt
                insort(creditors, (round_amount(credit - debt, decimals), creditor))
            else:
                amount = credit
                insort(debtors, (round_amount(debt - credit, decimals), debtor))

            exchanges.append(Exchange(payer=debtor, receiver=creditor, amount=amount))

        for magnitude, user_id in debtors + creditors:
            logger.debug("Discarding rounding residual of %s for %s", magnitude, user_id)

        return exchanges

    @staticmethod
    def optimize_settlements(group: Group, config: Optional[SettlementConfig] = None) -> SettlementResult:
        """Main method to calculate the settlement of a group"""
        config = config or SettlementConfig()
        balances = SettlementOptimizer.calculate_balances(group.expenses)

        naive = SettlementOptimizer.naive_exchanges(group.expenses, config)
        simplified = SettlementOptimizer.minimize_transactions(balances, config)

        # Make sure the simplification didn't end up needing more exchanges
        if len(simplified) < len(naive) or (config.prefer_greedy_on_tie and len(simplified) == len(naive)):
            strategy, exchanges = GREEDY, simplified
        else:
            strategy, exchanges = NAIVE, naive

        logger.debug(
            "Group %s: %d naive exchanges, %d greedy exchanges, using %s",
            group.id, len(naive), len(simplified), strategy,
        )

        return SettlementResult(
            group_id=group.id,
            balances=balances,
            exchanges=exchanges,
            strategy=strategy,
        )

    @staticmethod
    def settle(group: Group, config: Optional[SettlementConfig] = None) -> List[Exchange]:
        return SettlementOptimizer.optimize_settlements(group, config).exchanges
