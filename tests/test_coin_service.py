import pytest

from conftest import create_user
from souldiary.core.exceptions import InsufficientBalanceError, NotFoundError, ValidationError
from souldiary.models.coin import CoinLedger
from souldiary.services.coin_service import CoinService


@pytest.fixture
def coin_service(db):
    return CoinService(db)


class TestCoinService:
    def test_signup_grant_is_recorded_in_ledger(self, coin_service, session_factory, settings):
        create_user(session_factory, settings)

        history = coin_service.get_history("alice")

        assert coin_service.get_balance("alice") == 5000
        assert history.balance == 5000
        assert history.total_count == 1
        entry = history.entries[0]
        assert entry.transaction_type == "CREDIT"
        assert entry.delta == 5000
        assert entry.balance_after == 5000
        assert entry.ref_id == "signup_bonus_alice"

    def test_debit_reduces_balance(self, coin_service, db, session_factory, settings):
        create_user(session_factory, settings)

        balance_after = coin_service.debit("alice", 1200, "test", "ref-1")
        db.commit()

        assert balance_after == 3800
        assert coin_service.get_balance("alice") == 3800

    def test_debit_more_than_balance_changes_nothing(self, coin_service, db, session_factory, settings):
        create_user(session_factory, settings)

        with pytest.raises(InsufficientBalanceError) as exc_info:
            coin_service.debit("alice", 5001, "too much", "ref-2")
        db.commit()

        assert exc_info.value.details == {"required": 5001, "available": 5000}
        assert coin_service.get_balance("alice") == 5000
        assert db.query(CoinLedger).filter(CoinLedger.ref_id == "ref-2").count() == 0

    def test_debit_entire_balance_reaches_zero(self, coin_service, db, session_factory, settings):
        create_user(session_factory, settings)

        assert coin_service.debit("alice", 5000, "all in", "ref-3") == 0
        db.commit()

        with pytest.raises(InsufficientBalanceError):
            coin_service.debit("alice", 1, "one more", "ref-4")

    def test_negative_amounts_are_rejected(self, coin_service, session_factory, settings):
        create_user(session_factory, settings)

        with pytest.raises(ValidationError):
            coin_service.debit("alice", -10, "negative", "ref-5")
        with pytest.raises(ValidationError):
            coin_service.credit("alice", 0, "zero", "ref-6")

    def test_unknown_user(self, coin_service):
        with pytest.raises(NotFoundError):
            coin_service.get_balance("ghost")
        with pytest.raises(NotFoundError):
            coin_service.debit("ghost", 10, "x", "ref-7")

    def test_history_is_newest_first_and_paged(self, coin_service, db, session_factory, settings):
        create_user(session_factory, settings)
        coin_service.debit("alice", 100, "first", "ref-a")
        coin_service.debit("alice", 200, "second", "ref-b")
        db.commit()

        page = coin_service.get_history("alice", limit=2, offset=0)

        assert page.total_count == 3
        assert page.has_next is True
        assert [e.ref_id for e in page.entries] == ["ref-b", "ref-a"]
        assert page.entries[0].balance_after == 4700
