from pydantic import BaseModel, Field, field_validator
from typing import List, Dict


class Expense(BaseModel):
    name: str = Field("", description="Description of the expense")
    amount: float = Field(..., gt=0, allow_inf_nan=False, description="Amount paid")
    payer: str = Field(..., min_length=1, description="Nick of the user who paid the expense")
    receivers: List[str] = Field(
        ..., min_length=1, description="Nicks the expense is split between, one share per entry"
    )

    @field_validator("receivers")
    @classmethod
    def receivers_not_blank(cls, receivers):
        if any(not nick for nick in receivers):
            raise ValueError("receiver nicks must be non-empty strings")
        return receivers


class Group(BaseModel):
    id: str
    name: str
    expenses: List[Expense] = Field(default_factory=list)

    def participants(self) -> List[str]:
        """Every nick that paid for or received a share of an expense"""
        nicks = set()
        for expense in self.expenses:
            nicks.add(expense.payer)
            nicks.update(expense.receivers)
        return sorted(nicks)

    def has_participant(self, nick: str) -> bool:
        return any(
            expense.payer == nick or nick in expense.receivers
            for expense in self.expenses
        )


class Exchange(BaseModel):
    payer: str
    receiver: str
    amount: float = Field(..., ge=0)


class UserGroupBalance(BaseModel):
    group_id: str
    group_name: str
    amount: float


class SettlementResult(BaseModel):
    group_id: str
    balances: Dict[str, float]
    exchanges: List[Exchange]
    strategy: str = Field(..., description="Algorithm that produced the exchanges: naive or greedy")
