"""
Reply Mapper: Outcome -> reply objects the HTTP layer serializes.

    {"errorCode": 0, "ids": [10, 11]}
    {"errorCode": 2, "errorName": "NotFoundError"}

`errorName` is omitted when the Error Name Table has no entry for the code;
`ids` is omitted unless an add succeeded.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from webapi.errors.codes import ErrorCode
from .error_names import ErrorNameTable
from .outcome import Outcome


class Reply(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error_code: int
    error_name: str | None = None


class AddReply(Reply):
    ids: list[int] | None = None


class ReplyMapper:
    def __init__(self, error_names: ErrorNameTable) -> None:
        self.error_names = error_names

    def error_reply(self, code: ErrorCode | int) -> Reply:
        return Reply(error_code=int(code), error_name=self.error_names.name_for(code))

    def reply(self, outcome: Outcome) -> Reply:
        return self.error_reply(outcome.code)

    def add_reply(self, outcome: Outcome) -> AddReply:
        return AddReply(
            error_code=int(outcome.code),
            error_name=self.error_names.name_for(outcome.code),
            ids=outcome.ids if outcome.ok else None,
        )


def dump_reply(reply: Reply) -> dict:
    """JSON body for a reply: camelCase keys, unset optionals dropped."""
    return reply.model_dump(by_alias=True, exclude_none=True)
