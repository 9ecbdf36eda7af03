"""Failure codes: one stable integer per predicate."""

from __future__ import annotations

from enum import IntEnum, unique

__all__ = ['Code']


@unique
class Code(IntEnum):
    """Machine-checkable failure codes.

    Every predicate raises with one of these codes. ``@unique`` rejects aliases
    at import time, so no two constants share a value. Character-class string
    predicates (``alpha``, ``digits``, ``lower``...) report ``INVALID_REGEX``
    since they are regex checks.
    """

    INVALID_FLOAT = 9
    INVALID_INTEGER = 10
    INVALID_DIGIT = 11
    INVALID_INTEGERISH = 12
    INVALID_BOOLEAN = 13
    VALUE_EMPTY = 14
    VALUE_NULL = 15
    INVALID_STRING = 16
    INVALID_REGEX = 17
    INVALID_MIN_LENGTH = 18
    INVALID_MAX_LENGTH = 19
    INVALID_STRING_START = 20
    INVALID_STRING_CONTAINS = 21
    INVALID_CHOICE = 22
    INVALID_NUMERIC = 23
    INVALID_ARRAY = 24
    VALUE_NOT_NULL = 25
    INVALID_KEY_EXISTS = 26
    INVALID_NOT_BLANK = 27
    INVALID_INSTANCE_OF = 28
    INVALID_SUBCLASS_OF = 29
    INVALID_RANGE = 30
    INVALID_ALNUM = 31
    INVALID_TRUE = 32
    INVALID_EQ = 33
    INVALID_SAME = 34
    INVALID_MIN = 35
    INVALID_MAX = 36
    INVALID_LENGTH = 37
    INVALID_FALSE = 38
    INVALID_NOT_FALSE = 39
    INVALID_UUID = 40
    INVALID_COUNT = 41
    INVALID_NOT_EQ = 42
    INVALID_NOT_SAME = 43
    INVALID_TRAVERSABLE = 44
    INVALID_ARRAY_ACCESSIBLE = 45
    INVALID_KEY_ISSET = 46
    INVALID_VALUE_IN_ARRAY = 47
    INVALID_E164 = 48
    INVALID_BASE64 = 49
    INVALID_NOT_REGEX = 50

    INVALID_DIRECTORY = 101
    INVALID_FILE = 102
    INVALID_READABLE = 103
    INVALID_WRITEABLE = 104
    INVALID_CLASS = 105
    INVALID_INTERFACE = 106

    INVALID_EMAIL = 201
    INTERFACE_NOT_IMPLEMENTED = 202
    INVALID_URL = 203
    INVALID_NOT_INSTANCE_OF = 204
    VALUE_NOT_EMPTY = 205
    INVALID_JSON_STRING = 206
    INVALID_OBJECT = 207
    INVALID_METHOD = 208
    INVALID_SCALAR = 209
    INVALID_LESS = 210
    INVALID_LESS_OR_EQUAL = 211
    INVALID_GREATER = 212
    INVALID_GREATER_OR_EQUAL = 213
    INVALID_DATE = 214
    INVALID_CALLABLE = 215
    INVALID_KEY_NOT_EXISTS = 216
    INVALID_SATISFY = 217
    INVALID_IP = 218
    INVALID_BETWEEN = 219
    INVALID_BETWEEN_EXCLUSIVE = 220
    INVALID_CONSTANT = 221
    INVALID_EXTENSION = 222
    INVALID_VERSION = 223
    INVALID_PROPERTY = 224
    INVALID_PROPERTY_NOT_EXISTS = 225
    INVALID_COUNTABLE = 226
    INVALID_MIN_COUNT = 227
    INVALID_MAX_COUNT = 228
    INVALID_STRING_NOT_CONTAINS = 229
    INVALID_UNIQUE_VALUES = 230
    INVALID_LIST = 231
    INVALID_MAP = 232
    INVALID_COUNT_BETWEEN = 233
    INVALID_ARRAY_KEY = 234
    INVALID_POSITIVE_INTEGER = 235
    INVALID_NATURAL = 236
    INVALID_STRING_END = 238
    INVALID_ITERABLE = 239
    INVALID_INSTANCE_OF_ANY = 240
    INVALID_ANY_OF = 241
    INVALID_NOT_A = 242
    INVALID_RESOURCE = 243
    INVALID_METHOD_NOT_EXISTS = 244
    INVALID_THROWS = 245
