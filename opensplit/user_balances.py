from typing import Iterable, List

from .models import Group, UserGroupBalance
from .settlement_optimizer import split_share


def balances_by_group(nick: str, groups: Iterable[Group]) -> List[UserGroupBalance]:
    """Net position of one user in each group, in the order the groups were given.

    Groups the user never appears in are still reported, with an amount of 0.
    Paying for an expense and receiving a share of it both count, so a payer
    who is also a receiver ends up with the amount minus their own shares.
    Nothing is netted across groups.
    """
    user_balances = []

    for group in groups:
        amount = 0.0
        for expense in group.expenses:
            share = split_share(expense)
            if expense.payer == nick:
                amount += expense.amount
            for receiver in expense.receivers:
                if receiver == nick:
                    amount -= share

        user_balances.append(UserGroupBalance(group_id=group.id, group_name=group.name, amount=amount))

    return user_balances
