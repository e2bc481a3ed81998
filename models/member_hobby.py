from datetime import datetime
from ..extensions import db


class MemberHobby(db.Model):
    __tablename__ = "member_hobbies"

    id: int = db.Column(db.Integer, primary_key=True)
    member_id: int = db.Column(
        db.Integer,
        db.ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # 取值必须是趣味目录中的 id，由表单校验保证
    hobby_id: int = db.Column(db.Integer, nullable=False)
    created = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    modified = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    member = db.relationship("Member", back_populates="hobbies")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<MemberHobby member={self.member_id} hobby={self.hobby_id}>"
