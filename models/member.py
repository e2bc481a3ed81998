from datetime import datetime
from ..extensions import db


class Member(db.Model):
	__tablename__ = "members"

	id = db.Column(db.Integer, primary_key=True)
	email = db.Column(db.String(255), unique=True, nullable=False, index=True)
	# 按提交原文保存，不做哈希
	password = db.Column(db.String(255), nullable=False)
	created = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
	modified = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

	profile = db.relationship(
		"MemberProfile",
		back_populates="member",
		uselist=False,
		cascade="all, delete-orphan",
	)

	hobbies = db.relationship(
		"MemberHobby",
		back_populates="member",
		order_by="MemberHobby.id",
		cascade="all, delete-orphan",
	)

	def to_dict(self) -> dict:
		"""序列化为对外数据，password 不输出"""
		return {
			"id": self.id,
			"email": self.email,
			"created": self.created.isoformat() if self.created else None,
			"modified": self.modified.isoformat() if self.modified else None,
			"profile": self.profile.to_dict() if self.profile else None,
			"hobbies": [h.hobby_id for h in self.hobbies],
		}

	def __repr__(self) -> str:  # pragma: no cover 简单repr无需测试
		return f"<Member {self.email}>"
