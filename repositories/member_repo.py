"""会员数据访问仓库

抽象出 members / member_profiles / member_hobbies 三张表的数据库访问逻辑。"""

from typing import Sequence
from ..extensions import db
from ..models.member import Member
from ..models.member_profile import MemberProfile
from ..models.member_hobby import MemberHobby
from ..services.member_drafts import MemberDraft


def get_by_email(email: str) -> Member | None:
	return Member.query.filter_by(email=email).first()


def email_exists(email: str) -> bool:
	return db.session.query(Member.id).filter_by(email=email).first() is not None


def count_members() -> int:
	return Member.query.count()


def count_profiles() -> int:
	return MemberProfile.query.count()


def count_hobbies() -> int:
	return MemberHobby.query.count()


def list_hobby_ids(member_id: int) -> Sequence[int]:
	rows = (
		db.session.query(MemberHobby.hobby_id)
		.filter(MemberHobby.member_id == member_id)
		.order_by(MemberHobby.id)
		.all()
	)
	return [row.hobby_id for row in rows]


def create_member(draft: MemberDraft, *, commit: bool = True) -> Member:
	"""
	一次性写入 Member + Profile + HobbyLink。
	三张表在同一事务内提交，任何一步失败都会回滚后重新抛出异常，
	不会留下部分写入的数据。
	"""
	member = Member(email=draft.email, password=draft.password)
	member.profile = MemberProfile(
		name=draft.profile.name,
		nickname=draft.profile.nickname,
	)
	# 按草稿顺序追加，保证 id 递增顺序与提交顺序一致
	for hobby in draft.hobbies:
		member.hobbies.append(MemberHobby(hobby_id=hobby.hobby_id))

	try:
		db.session.add(member)
		if commit:
			db.session.commit()
		else:
			db.session.flush()
	except Exception:
		db.session.rollback()
		raise
	return member
