from __future__ import annotations


class DatabaseError(Exception):
    """
    Base error for every failure raised by the store.

    `key` is the offending key when there is one.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class InvalidKeyError(DatabaseError):
    def __init__(self, key: object = None) -> None:
        super().__init__("The key is not defined!", key=key if isinstance(key, str) else None)


class InvalidKeyTypeError(DatabaseError, TypeError):
    def __init__(self, key: object) -> None:
        super().__init__(f"The key must be a string! (got {type(key).__name__})")
        self.invalid_key = key


class InvalidValueTypeError(DatabaseError, TypeError):
    def __init__(self, key: str, value: object) -> None:
        super().__init__(f"The value must be a number! (got {type(value).__name__})", key=key)
        self.value = value


class CannotCreatePropertyError(DatabaseError):
    def __init__(self, key: str, segment: str, kind: str) -> None:
        super().__init__(f"Cannot create property '{segment}' on {kind}", key=key)
        self.segment = segment
        self.kind = kind


class NonNumericTargetError(DatabaseError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Cannot add a number to a non-numeric value at key '{key}'", key=key)


class NotAnArrayError(DatabaseError):
    def __init__(self, key: str, action: str) -> None:
        preposition = "to" if action == "push" else "from"
        super().__init__(f"Cannot {action} {preposition} a non-array value at key '{key}'", key=key)
        self.action = action
