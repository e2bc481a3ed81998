#会员注册：校验 -> 组装草稿 -> 事务写入
from typing import Any, Mapping
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ..extensions import db
from ..constant import DEFAULT_MESSAGES, EXCEPTION_FIELD, ErrorCode, FormField
from ..models.member import Member
from ..repositories import member_repo
from ..utils.validator import Validator
from .member_drafts import MemberDraft, build_member_draft

ErrorMap = dict[str, dict[str, str]]


def _email_taken(messages: Mapping[str, str]) -> ErrorMap:
    code = ErrorCode.IS_UNIQUE.value
    return {FormField.EMAIL.value: {code: messages.get(code, DEFAULT_MESSAGES[code])}}


def _unexpected(exc: Exception) -> ErrorMap:
    return {EXCEPTION_FIELD: {ErrorCode.UNEXPECTED.value: str(exc)}}


#####################################
#写入会员及其关联数据
def Save_member(draft: MemberDraft, messages: Mapping[str, str] | None = None) -> tuple[Member | None, ErrorMap]:
    """把草稿作为一个整体写入数据库

    Args:
        draft: build_member_draft 生成的草稿
        messages: 错误提示文案（可选）

    Returns:
        tuple: (Member对象或None, 错误字典)
               - 成功: (Member, {})
               - 邮箱已存在: (None, {"email": {"isUnique": ...}})
               - 其他数据库异常: (None, {"exception": {"unexpected": 诊断信息}})
    """
    messages = messages or {}
    logger = current_app.logger

    try:
        if member_repo.email_exists(draft.email):
            logger.info("Registration rejected, email already registered")
            return None, _email_taken(messages)
        member = member_repo.create_member(draft)
    except IntegrityError as e:
        # 并发注册同一邮箱时由唯一索引兜底
        try:
            taken = member_repo.email_exists(draft.email)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Email re-check failed after integrity error")
            return None, _unexpected(e)
        if taken:
            logger.info("Registration rejected by unique constraint on email")
            return None, _email_taken(messages)
        logger.exception("Member registration failed with integrity error")
        return None, _unexpected(e)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Member registration failed")
        return None, _unexpected(e)

    logger.info("Member %s registered with %d hobbies", member.id, len(member.hobbies))
    return member, {}
#####################################


#####################################
#注册表单
class AddMemberForm:
    """
    会员注册表单。
    execute() 每次调用都会重置状态：先校验，校验通过后才写库；
    errors() 返回最近一次 execute 的错误（尚未执行或执行成功时为空）。
    """

    def __init__(self, catalog: Mapping[int, str], messages: Mapping[str, str] | None = None):
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self.validator = Validator(catalog, self.messages)
        self._errors: ErrorMap = {}
        self.member: Member | None = None
        self.is_resolved = False

    def validate(self, data: Mapping[str, Any] | None) -> bool:
        self._errors = self.validator.validate(data)
        return not self._errors

    def execute(self, data: Mapping[str, Any] | None) -> bool:
        self._errors = {}
        self.member = None
        self.is_resolved = False

        try:
            if not self.validate(data):
                current_app.logger.debug("Registration form invalid: %s", sorted(self._errors))
                return False

            member, errors = Save_member(build_member_draft(data or {}), self.messages)
            if errors:
                self._errors = errors
                return False

            self.member = member
            return True
        finally:
            self.is_resolved = True

    def errors(self) -> ErrorMap:
        return self._errors
#####################################
