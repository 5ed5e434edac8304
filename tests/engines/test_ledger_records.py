"""
txledger Ledger Engine — Transaction Record Tests
===================================================
Constructors, type parsing, validation contract, dispute flag.
"""

from decimal import Decimal

import pytest

from engines.ledger.commands import TransactionRecord, TransactionType

CLIENT = 500
TX = 600
AMOUNT = Decimal("100.0")


class TestTransactionType:

    @pytest.mark.parametrize("text", ["deposit", "DEPOSIT", " Deposit "])
    def test_parse_case_insensitive(self, text):
        assert TransactionType.parse(text) is TransactionType.DEPOSIT

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown transaction type"):
            TransactionType.parse("transfer")

    def test_moves_funds(self):
        assert TransactionType.DEPOSIT.moves_funds
        assert TransactionType.WITHDRAWAL.moves_funds
        assert not TransactionType.DISPUTE.moves_funds
        assert not TransactionType.RESOLVE.moves_funds
        assert not TransactionType.CHARGEBACK.moves_funds


class TestConstructors:

    def test_deposit(self):
        t = TransactionRecord.deposit(CLIENT, TX, AMOUNT)
        assert t.tx_type is TransactionType.DEPOSIT
        assert (t.client_id, t.tx_id, t.amount) == (CLIENT, TX, AMOUNT)
        assert t.in_dispute is False
        assert t.validate()

    def test_withdrawal_with_dispute_flag(self):
        t = TransactionRecord.withdrawal(CLIENT, TX, AMOUNT, in_dispute=True)
        assert t.tx_type is TransactionType.WITHDRAWAL
        assert t.in_dispute is True
        assert t.validate()

    @pytest.mark.parametrize("factory,tx_type", [
        (TransactionRecord.dispute, TransactionType.DISPUTE),
        (TransactionRecord.resolve, TransactionType.RESOLVE),
        (TransactionRecord.chargeback, TransactionType.CHARGEBACK),
    ])
    def test_control_records(self, factory, tx_type):
        t = factory(CLIENT, TX)
        assert t.tx_type is tx_type
        assert t.amount is None
        assert t.in_dispute is False
        assert t.validate()


class TestValidate:

    def test_deposit_without_amount_invalid(self):
        t = TransactionRecord(TransactionType.DEPOSIT, CLIENT, TX)
        assert t.validate() is False

    def test_withdrawal_without_amount_invalid(self):
        t = TransactionRecord(TransactionType.WITHDRAWAL, CLIENT, TX)
        assert t.validate() is False

    def test_dispute_with_amount_invalid(self):
        t = TransactionRecord(TransactionType.DISPUTE, CLIENT, TX, amount=AMOUNT)
        assert t.validate() is False

    def test_resolve_flagged_in_dispute_invalid(self):
        t = TransactionRecord(TransactionType.RESOLVE, CLIENT, TX, in_dispute=True)
        assert t.validate() is False

    def test_zero_and_negative_amounts_accepted(self):
        assert TransactionRecord.deposit(CLIENT, TX, Decimal("0")).validate()
        assert TransactionRecord.withdrawal(CLIENT, TX, Decimal("-5")).validate()


class TestDisputeFlag:

    def test_set_disputed(self):
        t = TransactionRecord.deposit(CLIENT, TX, AMOUNT)
        assert not t.is_disputed
        t.set_disputed()
        assert t.is_disputed

    def test_clear_disputed(self):
        t = TransactionRecord.deposit(CLIENT, TX, AMOUNT, in_dispute=True)
        assert t.is_disputed
        t.clear_disputed()
        assert not t.is_disputed

    @pytest.mark.parametrize("factory", [
        TransactionRecord.dispute,
        TransactionRecord.resolve,
        TransactionRecord.chargeback,
    ])
    def test_control_records_never_flagged(self, factory):
        t = factory(CLIENT, TX)
        t.set_disputed()
        assert not t.is_disputed
        assert t.validate()
