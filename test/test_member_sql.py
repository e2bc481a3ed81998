#services/member_tasks.py 与 repositories/member_repo.py 单元测试
import logging
import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from ..extensions import db
from ..models.member import Member
from ..models.member_hobby import MemberHobby
from ..repositories import member_repo
from ..services import member_tasks
from ..services.member_drafts import build_member_draft
from ..services.member_tasks import AddMemberForm, Save_member


@pytest.fixture()
def form(catalog):
    return AddMemberForm(catalog)


def _assert_counts(members, profiles, hobbies):
    assert member_repo.count_members() == members
    assert member_repo.count_profiles() == profiles
    assert member_repo.count_hobbies() == hobbies


##################################
#表单状态
def test_form_starts_idle(form):
    assert form.errors() == {}
    assert form.member is None
    assert form.is_resolved is False


def test_required_validation_skips_persistence(form, monkeypatch):
    called = []
    monkeypatch.setattr(member_tasks, "Save_member", lambda *a, **k: called.append(1))

    data = {k: None for k in ("email", "password", "name", "nickname", "hobby1", "hobby2", "hobby3")}
    assert form.execute(data) is False
    assert form.is_resolved is True
    assert called == [], "校验失败时不应写库"
    for key in ("email", "password", "name", "nickname", "hobby1"):
        assert "required" in form.errors()[key], f"{key} 的校验结果不符合预期"
    _assert_counts(0, 0, 0)
##################################


##################################
#保存
def test_save_all_hobbies(form, valid_data):
    assert form.execute(valid_data) is True
    assert form.errors() == {}
    _assert_counts(1, 1, 3)

    member = Member.query.first()
    assert member.email == "test@example.jp"
    assert member.password == "123456"
    assert member.profile.name == "テスト太郎"
    assert member.profile.nickname == "taro"
    assert member.created is not None and member.modified is not None
    assert member_repo.list_hobby_ids(member.id) == [1, 2, 3]
    assert form.member.id == member.id


def test_save_two_hobbies(form, valid_data):
    valid_data.update(hobby2=None, hobby3=3)
    assert form.execute(valid_data) is True
    _assert_counts(1, 1, 2)
    member = member_repo.get_by_email("test@example.jp")
    assert member_repo.list_hobby_ids(member.id) == [1, 3]


def test_save_single_hobby(form, valid_data):
    valid_data.update(hobby2="", hobby3="")
    assert form.execute(valid_data) is True
    _assert_counts(1, 1, 1)
    assert [h.hobby_id for h in MemberHobby.query.all()] == [1]


def test_errors_reset_between_runs(form, valid_data):
    assert form.execute({**valid_data, "email": ""}) is False
    assert "email" in form.errors()
    assert form.execute(valid_data) is True
    assert form.errors() == {}
##################################


##################################
#邮箱重复
def test_duplicate_email_is_rejected(form, valid_data):
    valid_data.update(hobby2=None, hobby3=None)
    assert form.execute(valid_data) is True

    second = {
        "email": "test@example.jp",
        "password": "789012",
        "name": "テスト次郎",
        "nickname": "jiro",
        "hobby1": 1,
        "hobby2": 2,
        "hobby3": 3,
    }
    assert form.execute(second) is False
    assert "isUnique" in form.errors()["email"]
    assert form.member is None
    _assert_counts(1, 1, 1)


def test_unique_constraint_catches_race(app, catalog, valid_data, monkeypatch):
    # 模拟并发：预检查时邮箱尚不存在，写入时被唯一索引拦截
    assert AddMemberForm(catalog).execute(valid_data) is True
    real_exists = member_repo.email_exists
    calls = []

    def exists_after_first_call(email):
        calls.append(email)
        return False if len(calls) == 1 else real_exists(email)

    monkeypatch.setattr(member_repo, "email_exists", exists_after_first_call)
    member, errors = Save_member(build_member_draft({**valid_data, "nickname": "jiro"}))
    assert member is None
    assert "isUnique" in errors["email"]
    _assert_counts(1, 1, 3)
##################################


##################################
#异常与回滚
def test_failed_hobby_insert_rolls_back_everything(form, valid_data):
    def fail_insert(mapper, connection, target):
        raise SQLAlchemyError("member_hobbies insert failed")

    event.listen(MemberHobby, "before_insert", fail_insert)
    try:
        assert form.execute(valid_data) is False
    finally:
        event.remove(MemberHobby, "before_insert", fail_insert)

    assert "exception" in form.errors()
    assert "member_hobbies insert failed" in form.errors()["exception"]["unexpected"]
    _assert_counts(0, 0, 0)


def test_unexpected_failure_is_logged(form, valid_data, monkeypatch, caplog):
    def broken(draft, *, commit=True):
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(member_repo, "create_member", broken)
    with caplog.at_level(logging.ERROR):
        assert form.execute(valid_data) is False

    assert form.errors() == {"exception": {"unexpected": "database unavailable"}}
    assert "Member registration failed" in caplog.text
    _assert_counts(0, 0, 0)


def test_connection_lost_on_first_query(form, valid_data, monkeypatch, caplog):
    # 第一次访问数据库（邮箱预检查）即失败
    def db_down(email):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(member_repo, "email_exists", db_down)
    with caplog.at_level(logging.ERROR):
        assert form.execute(valid_data) is False

    assert set(form.errors()) == {"exception"}
    assert "db down" in form.errors()["exception"]["unexpected"]
    assert form.member is None
    assert "Member registration failed" in caplog.text
    _assert_counts(0, 0, 0)


def test_recheck_failure_after_integrity_error(catalog, valid_data, monkeypatch, caplog):
    assert AddMemberForm(catalog).execute(valid_data) is True
    calls = []

    def exists_then_fail(email):
        calls.append(email)
        if len(calls) == 1:
            return False
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(member_repo, "email_exists", exists_then_fail)
    with caplog.at_level(logging.ERROR):
        member, errors = Save_member(build_member_draft({**valid_data, "nickname": "jiro"}))

    assert member is None
    assert set(errors) == {"exception"}
    assert "UNIQUE" in errors["exception"]["unexpected"].upper()
    assert "Email re-check failed" in caplog.text
    _assert_counts(1, 1, 3)


def test_create_member_without_commit_can_be_rolled_back(valid_data):
    member = member_repo.create_member(build_member_draft(valid_data), commit=False)
    assert member.id is not None
    db.session.rollback()
    _assert_counts(0, 0, 0)
##################################
