from .outcome import Outcome
from .error_names import ErrorNameTable
from .mapper import Reply, AddReply, ReplyMapper, dump_reply

__all__ = ["Outcome", "ErrorNameTable", "Reply", "AddReply", "ReplyMapper", "dump_reply"]
