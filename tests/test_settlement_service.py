from decimal import Decimal

from splitter.models.settlement import MemberBalance, Transfer
from splitter.services.settlement_service import suggest_transfers


def _balances(*values):
    rows = []
    for idx, balance in enumerate(values, start=101):
        rows.append(MemberBalance(
            member_id=idx, display_name=chr(ord("A") + idx - 101), split_weight=Decimal("1"),
            is_owner=False, total_paid=max(balance, 0), share_amount=max(-balance, 0), balance=balance,
        ))
    return rows


def _pairs(transfers):
    return [(t.from_member_id, t.to_member_id, t.amount) for t in transfers]


def test_flow_matches_balances():
    transfers = suggest_transfers(_balances(500, -300, -200))
    assert transfers == [
        Transfer(from_member_id=102, to_member_id=101, amount=300, from_member_name="B", to_member_name="A"),
        Transfer(from_member_id=103, to_member_id=101, amount=200, from_member_name="C", to_member_name="A"),
    ]


def test_zero_balances_need_no_transfers():
    assert suggest_transfers(_balances(0, 0)) == []


def test_no_receivers():
    assert suggest_transfers(_balances(-400, -500)) == []


def test_no_payers():
    assert suggest_transfers(_balances(500, 500)) == []


def test_one_unit_balance():
    assert _pairs(suggest_transfers(_balances(1, -1))) == [(102, 101, 1)]


def test_one_debtor_pays_several_creditors():
    assert _pairs(suggest_transfers(_balances(300, -500, 200))) == [(102, 101, 300), (102, 103, 200)]


def test_encounter_order_not_magnitude():
    transfers = suggest_transfers(_balances(100, 400, -300, -200))
    assert _pairs(transfers) == [(103, 101, 100), (103, 102, 200), (104, 102, 200)]
    assert len(transfers) <= 2 + 2 - 1


def test_unbalanced_input_stops_quietly():
    assert _pairs(suggest_transfers(_balances(500, -200))) == [(102, 101, 200)]
    assert _pairs(suggest_transfers(_balances(200, -500))) == [(102, 101, 200)]


def test_transfers_zero_out_balances():
    balances = _balances(700, -250, 120, -370, -200)
    left = {b.member_id: b.balance for b in balances}
    for t in suggest_transfers(balances):
        assert t.amount > 0
        left[t.from_member_id] += t.amount
        left[t.to_member_id] -= t.amount
    assert all(v == 0 for v in left.values())
