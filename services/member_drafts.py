"""会员注册草稿

把校验通过的表单数据组装为 Member / Profile / HobbyLink 三类实体草稿，
纯函数，不做任何 I/O。"""

from typing import Any, Mapping
from pydantic import BaseModel, ConfigDict
from ..constant import FormField, HOBBY_FIELDS
from ..utils.validator import is_blank_hobby, to_int

#####################################
# Draft Definition

class ProfileDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    nickname: str


class HobbyDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    hobby_id: int


class MemberDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str
    profile: ProfileDraft
    hobbies: tuple[HobbyDraft, ...] = ()
#####################################


def build_hobby_drafts(data: Mapping[str, Any]) -> tuple[HobbyDraft, ...]:
    """按 hobby1, hobby2, hobby3 的顺序生成，空值跳过"""
    hobbies = []
    for field in HOBBY_FIELDS:
        value = data.get(field)
        if is_blank_hobby(value):
            continue
        hobbies.append(HobbyDraft(hobby_id=to_int(value)))
    return tuple(hobbies)


def build_member_draft(data: Mapping[str, Any]) -> MemberDraft:
    """data 需已通过 Validator 校验"""
    return MemberDraft(
        email=str(data.get(FormField.EMAIL.value)),
        password=str(data.get(FormField.PASSWORD.value)),
        profile=ProfileDraft(
            name=str(data.get(FormField.NAME.value)),
            nickname=str(data.get(FormField.NICKNAME.value)),
        ),
        hobbies=build_hobby_drafts(data),
    )
