from __future__ import annotations

from dataclasses import dataclass, field

from webapi.errors.codes import ErrorCode


@dataclass(frozen=True)
class Outcome:
    """
    Result of one batch operation.

    Success carries either generated ids (add) or nothing (modify/remove).
    Failure carries only a code; a failed batch was rolled back in full, so
    there are never ids to report alongside it.
    """

    code: ErrorCode
    ids: list[int] | None = field(default=None)

    @classmethod
    def success(cls, ids: list[int] | None = None) -> Outcome:
        return cls(ErrorCode.OK, list(ids) if ids is not None else None)

    @classmethod
    def failure(cls, code: ErrorCode) -> Outcome:
        if code == ErrorCode.OK:
            raise ValueError("failure outcome needs a non-OK code")
        return cls(code)

    @property
    def ok(self) -> bool:
        return self.code == ErrorCode.OK
