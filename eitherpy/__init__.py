from .either import (
    Either,
    Left,
    Right,
    left,
    right,
    is_left,
    is_right,
    map,
    map_left,
    chain,
    pipe,
    fold,
    from_nullable,
    get_or_else,
)
from .fault import try_catch, try_catch_async, try_catch_thread
from .task_either import (
    TaskEither,
    left_task,
    right_task,
    from_either,
    map_task,
    map_left_task,
    chain_task,
    pipe_task,
    fold_task,
    get_or_else_task,
)
from .logger import ConsoleLogger, get_logger, set_logger, configure_logging
