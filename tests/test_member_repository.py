# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
MemberRepository against an in-memory SQLite member table.
"""
from unittest.mock import MagicMock

from sqlalchemy import text

from member_service.repositories.member_repository import MemberRepository
from tests.conftest import make_member, years_ago


def _seed(repo, **overrides):
    return repo.insert(make_member(**overrides))


class TestListAndGet:
    def test_empty_table(self, repo):
        assert repo.list_all() == []

    def test_list_returns_every_row(self, repo):
        _seed(repo)
        _seed(repo, username="second", email="s@b.co", phone_number="22222222222")
        usernames = sorted(m.username for m in repo.list_all())
        assert usernames == ["abc", "second"]

    def test_get_round_trips_fields(self, repo):
        user_id = _seed(repo)
        record = repo.get(user_id)
        assert record.user_id == user_id
        assert record.phone_number == "12345678901"
        assert record.date_of_birth == years_ago(20)

    def test_get_missing(self, repo):
        assert repo.get(999) is None


class TestInsert:
    def test_assigns_increasing_ids(self, repo):
        first = _seed(repo)
        second = _seed(repo, username="other", email="o@b.co", phone_number="33333333333")
        assert second > first


class TestDuplicateCheck:
    def test_no_rows_no_duplicate(self, repo):
        assert repo.has_duplicate(make_member()) is False

    def test_same_username(self, repo):
        _seed(repo)
        candidate = make_member(email="x@y.zz", phone_number="99999999999")
        assert repo.has_duplicate(candidate) is True

    def test_same_email(self, repo):
        _seed(repo)
        candidate = make_member(username="fresh", phone_number="99999999999")
        assert repo.has_duplicate(candidate) is True

    def test_same_phone(self, repo):
        _seed(repo)
        candidate = make_member(username="fresh", email="x@y.zz")
        assert repo.has_duplicate(candidate) is True

    def test_all_fields_different(self, repo):
        _seed(repo)
        candidate = make_member(username="fresh", email="x@y.zz", phone_number="99999999999")
        assert repo.has_duplicate(candidate) is False

    def test_name_and_birth_date_are_not_keys(self, repo):
        _seed(repo)
        candidate = make_member(username="fresh", email="x@y.zz", phone_number="99999999999")
        assert candidate.name == "John"
        assert repo.has_duplicate(candidate) is False

    def test_except_ignores_own_row(self, repo):
        user_id = _seed(repo)
        assert repo.has_duplicate_except(user_id, make_member()) is False

    def test_except_still_sees_other_rows(self, repo):
        user_id = _seed(repo)
        _seed(repo, username="taken", email="t@b.co", phone_number="44444444444")
        candidate = make_member(username="taken")
        assert repo.has_duplicate_except(user_id, candidate) is True


class TestUpdateDelete:
    def test_update_existing(self, repo):
        user_id = _seed(repo)
        changed = make_member(name="Johnny", date_of_birth=years_ago(40))
        assert repo.update(user_id, changed) == 1
        record = repo.get(user_id)
        assert record.name == "Johnny"
        assert record.date_of_birth == years_ago(40)

    def test_update_missing_returns_zero(self, repo):
        assert repo.update(42, make_member()) == 0

    def test_delete_existing(self, repo):
        user_id = _seed(repo)
        assert repo.delete(user_id) == 1
        assert repo.get(user_id) is None

    def test_delete_missing_returns_zero(self, repo):
        assert repo.delete(42) == 0


class TestParameterBinding:
    def test_quotes_are_stored_verbatim(self, repo, engine):
        user_id = _seed(repo, name="O'Neil'); --")
        assert repo.get(user_id).name == "O'Neil'); --"
        with engine.connect() as conn:
            assert conn.execute(text("SELECT COUNT(*) FROM member")).scalar() == 1

    def test_values_never_inlined(self):
        mock_engine = MagicMock()
        conn = mock_engine.connect.return_value.__enter__.return_value
        conn.execute.return_value.scalar.return_value = 0
        MemberRepository(mock_engine).has_duplicate(make_member(username="evil' OR 1=1"))
        statement, params = conn.execute.call_args.args
        assert "evil" not in str(statement)
        assert params["username"] == "evil' OR 1=1"


class TestLifecycle:
    def test_create_schema_is_idempotent(self, repo):
        repo.create_schema()
        assert repo.list_all() == []

    def test_verify_connection(self, repo):
        repo.verify_connection()
