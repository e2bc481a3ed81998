from .member import Member
from .member_profile import MemberProfile
from .member_hobby import MemberHobby

__all__ = ["Member", "MemberProfile", "MemberHobby"]
