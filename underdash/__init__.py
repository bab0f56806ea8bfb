# coding: utf-8
# Underdash: list utilities over blocks that can steer the caller's loop.
import logging
from underdash.objects import (
        Block, BuiltIn, CallableFailure, EarlyExit, EarlyReturn, EmptyInput,
        Environment, Failure, Frame, Function, InvalidArgument, Invocable, LoopBreak,
        LoopContinue, Normal, Outcome, Procedure, Scope, UndefinedName,
        UnderdashError, as_callable, block, default_environment, define,
        invoke, procedure, relay, unwrap, yield_,
        )
from underdash.base import (
        base_slice, slice_, first, last, rest, initial, drop, drop_right, take,
        take_right, index_of, includes, at,
        )
from underdash.shape import (
        merge, uniq, union, intersection, difference, flatten, flatten_deep,
        flatten_depth, has_depth, depth, zip_, unzip, pluck, compact,
        )
from underdash.lists import (
        each, each_index, each_slice, chunk, times, do, map_, sort_by, group_by,
        partition, reduce, reduce_right, all_, any_, detect, find_index,
        find_indexes, find_map, select, reject, take_while, max_, min_, shuffle,
        )
from underdash.assign import (
        push, pop, shift, unshift, splice, fill, remove, pull,
        )
from underdash.num import is_boolean, in_range
from underdash.string import empty, starts_with, ends_with, contains
from underdash.builtins import initialize_builtins
from underdash.logger import logger
from underdash.__version__ import version as __version__

# aliases
collect = map_
every = all_
filter_ = select
find = detect
foldl = inject = reduce
foldr = reduce_right
head = first
include = includes
some = any_
tail = rest
unique = uniq

def initialized_environment(debug: bool = False) -> Environment:
    env = Environment()
    initialize_builtins(env, debug)
    if debug:
        logger.setLevel(logging.DEBUG)
    return env

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
