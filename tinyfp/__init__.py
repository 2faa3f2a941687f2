from .unit import Unit, UNIT
from .errors import UnwrapError, MatchError
from .option import Option, Some, NONE, some, none, from_nullable
from .either import Either, Left, Right, attempt
from .seq import Seq, map_seq, filter_seq, for_each, fold, reduce
from .functional import tee, pipe
from .aio import Pending, map_async, bind_async, tee_async, match_async, from_result
from .logger import ConsoleLogger, log_value, log_left
