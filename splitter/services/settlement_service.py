# splitter/services/settlement_service.py
from typing import List, Sequence
from splitter.models.settlement import MemberBalance, Transfer

def suggest_transfers(balances: Sequence[MemberBalance]) -> List[Transfer]:
    # encounter order, no sorting; stops when either side runs out
    creditors = [[b, b.balance] for b in balances if b.balance > 0]
    debtors = [[b, b.balance] for b in balances if b.balance < 0]
    i = j = 0
    transfers = []
    while i < len(creditors) and j < len(debtors):
        creditor, cred_amt = creditors[i]
        debtor, debt_amt = debtors[j]
        pay = min(cred_amt, -debt_amt)
        if pay > 0:
            transfers.append(Transfer(
                from_member_id=debtor.member_id, to_member_id=creditor.member_id, amount=pay,
                from_member_name=debtor.display_name, to_member_name=creditor.display_name,
            ))
        creditors[i][1] = cred_amt - pay
        debtors[j][1] = debt_amt + pay
        if creditors[i][1] <= 0:
            i += 1
        if debtors[j][1] >= 0:
            j += 1
    return transfers
