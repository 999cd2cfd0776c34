from webapi.errors.codes import ErrorCode
from webapi.replies import AddReply, ErrorNameTable, Outcome, ReplyMapper, dump_reply

NAMES = ErrorNameTable({0: "Ok", 1: "DatabaseError", 2: "NotFoundError"})


def test_reply_resolves_name():
    reply = ReplyMapper(NAMES).reply(Outcome.failure(ErrorCode.NOT_FOUND_ERROR))

    assert dump_reply(reply) == {"errorCode": 2, "errorName": "NotFoundError"}


def test_unresolved_name_is_omitted():
    reply = ReplyMapper(ErrorNameTable()).reply(Outcome.failure(ErrorCode.DATABASE_ERROR))

    assert dump_reply(reply) == {"errorCode": 1}


def test_add_reply_carries_ids_on_success():
    reply = ReplyMapper(NAMES).add_reply(Outcome.success([10, 11]))

    assert isinstance(reply, AddReply)
    assert dump_reply(reply) == {"errorCode": 0, "errorName": "Ok", "ids": [10, 11]}


def test_add_reply_of_empty_batch_keeps_empty_ids():
    reply = ReplyMapper(NAMES).add_reply(Outcome.success([]))

    assert dump_reply(reply)["ids"] == []


def test_add_reply_failure_has_no_ids():
    reply = ReplyMapper(NAMES).add_reply(Outcome.failure(ErrorCode.DATABASE_ERROR))

    assert dump_reply(reply) == {"errorCode": 1, "errorName": "DatabaseError"}


def test_error_reply_for_boundary_code():
    reply = ReplyMapper(NAMES).error_reply(ErrorCode.INVALID_REQUEST)

    assert dump_reply(reply) == {"errorCode": 3}
