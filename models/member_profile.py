from datetime import datetime
from ..extensions import db


class MemberProfile(db.Model):
    __tablename__ = "member_profiles"

    id: int = db.Column(db.Integer, primary_key=True)
    member_id: int = db.Column(
        db.Integer,
        db.ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: str = db.Column(db.String(64), nullable=False)
    nickname: str = db.Column(db.String(64), nullable=False)
    created = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    modified = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    member = db.relationship("Member", back_populates="profile")

    def to_dict(self) -> dict:
        return {"name": self.name, "nickname": self.nickname}

    def __repr__(self) -> str:  # pragma: no cover
        return f"<MemberProfile {self.nickname} (member={self.member_id})>"
