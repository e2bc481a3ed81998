from enum import Enum


class FormField(Enum):
    EMAIL = "email"
    PASSWORD = "password"
    NAME = "name"
    NICKNAME = "nickname"
    HOBBY1 = "hobby1"
    HOBBY2 = "hobby2"
    HOBBY3 = "hobby3"


HOBBY_FIELDS = (FormField.HOBBY1.value, FormField.HOBBY2.value, FormField.HOBBY3.value)


class ErrorCode(Enum):
    REQUIRED = "required"
    MAX_LENGTH = "maxLength"
    MIN_LENGTH = "minLength"
    EMAIL = "email"
    NOT_INTEGER = "notInteger"
    IS_VALID_HOBBY = "isValidHobby"
    IS_UNIQUE_HOBBY = "isUniqueHobby"
    IS_UNIQUE = "isUnique"
    UNEXPECTED = "unexpected"


# 持久化层异常时使用的合成字段
EXCEPTION_FIELD = "exception"

EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 255
PROFILE_MAX_LENGTH = 64

DEFAULT_MESSAGES = {
    ErrorCode.REQUIRED.value: "This field is required.",
    ErrorCode.MAX_LENGTH.value: "The provided value is too long.",
    ErrorCode.MIN_LENGTH.value: "The provided value is too short.",
    ErrorCode.EMAIL.value: "The provided value must be a valid email address.",
    ErrorCode.NOT_INTEGER.value: "The provided value must be an integer.",
    ErrorCode.IS_VALID_HOBBY.value: "The selected hobby is invalid.",
    ErrorCode.IS_UNIQUE_HOBBY.value: "Please choose a hobby different from the other selections.",
    ErrorCode.IS_UNIQUE.value: "This email address is already registered.",
}
