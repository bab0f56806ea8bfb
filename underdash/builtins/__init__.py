# coding: utf-8
from underdash.objects import BuiltIn, Environment, yield_
from typing import Any, Callable, Optional
import underdash.assign as assign
import underdash.base as base
import underdash.lists as lists
import underdash.num as num
import underdash.shape as shape
import underdash.string as string
from underdash.logger import logger

def initialize_builtins(env: Environment, debug: bool = False) -> None:

    def put(*ss: str,
            docs: Optional[str] = None,
            stability: str = "stable") -> Callable[[Callable[..., Any]], None]:
        name = ss[0]
        aliases = list(ss)
        def inner_put(f: Callable[..., Any]) -> None:
            builtin = BuiltIn(name, f, aliases=aliases, docs=docs, stability=stability)
            for s in ss:
                env.put(s, builtin, docs=builtin.docs, stability=stability,
                        fail_if_overwrite=True)
        return inner_put

    env.put('Debug', int(debug),
            docs="""A variable tested to see whether debugging output should be
            enabled.""",
            stability="alpha")

    # Invocation {{{
    put('yield', docs="""Invoke a callable with the remaining arguments in a
            scope of its own and relay whatever it signals: its value, a
            failure, an early return, or a loop break or continue.

            ex: yield(lambda x, y: x + y, 1, 2) => 3""")(yield_)
    # }}}
    # Iteration {{{
    put('each')(lists.each)
    put('eachIndex', docs="""Invoke a callable with each element and its
            index. Returns the list itself.""")(lists.each_index)
    put('eachSlice')(lists.each_slice)
    put('chunk')(lists.chunk)
    put('times', docs="""Invoke a callable with 0, 1, ... up to but not
            including n.""", stability="beta")(lists.times)
    put('do', docs="""A do-while (or do-until) loop over two callables.

            ex: do(body, "while", condition)""", stability="beta")(lists.do)
    # }}}
    # Transformation {{{
    put('map', 'collect')(lists.map_)
    put('sortBy')(lists.sort_by)
    put('groupBy')(lists.group_by)
    put('partition')(lists.partition)
    put('reduce', 'foldl', 'inject')(lists.reduce)
    put('reduceRight', 'foldr')(lists.reduce_right)
    put('shuffle', stability="beta")(lists.shuffle)
    # }}}
    # Predicates and search {{{
    put('all', 'every', docs="""Whether a callable returns something truthy
            for every element. Without a callable the elements themselves are
            tested.

            ex: all([1, 2, 0]) => False""")(lists.all_)
    put('any', 'some', docs="""Whether a callable returns something truthy
            for some element. Without a callable the elements themselves are
            tested.

            ex: any([0, "", 3]) => True""")(lists.any_)
    put('detect', 'find')(lists.detect)
    put('findIndex')(lists.find_index)
    put('findIndexes')(lists.find_indexes)
    put('findMap', stability="beta")(lists.find_map)
    put('select', 'filter', docs="""The elements a callable accepts, in
            order.

            ex: select([1, 2, 3, 4, 5], lambda n: n < 3) => [1, 2]""")(lists.select)
    put('reject', docs="""The elements a callable does not accept, in order.

            ex: reject([1, 2, 3, 4, 5], lambda n: n < 3) => [3, 4, 5]""")(lists.reject)
    put('takeWhile')(lists.take_while)
    put('max')(lists.max_)
    put('min', docs="""The element whose callable result is smallest; the
            first one on ties. Fails on an empty list.""")(lists.min_)
    put('includes', 'include', docs="""Whether a value occurs in a list at or
            after an optional start index.""")(base.includes)
    put('indexOf', docs="""The first index of a value at or after an optional
            start index, or -1.

            ex: indexOf([1, 2, 3, 2], 2, 2) => 3""")(base.index_of)
    # }}}
    # Slicing {{{
    put('slice', docs="""The elements from start up to but not including stop.
            Negative indexes count from the end; a stop of 0 means the end.

            ex: slice([1, 2, 3, 4, 5], 1, 3) => [2, 3]""")(base.slice_)
    put('first', 'head', docs="""The first element, or None for an empty
            list.""")(base.first)
    put('last', docs="""The last element, or None for an empty list.""")(base.last)
    put('rest', 'tail', docs="""All but the first element.""")(base.rest)
    put('initial', docs="""All but the last element.""")(base.initial)
    put('drop', docs="""All but the first n elements.

            ex: drop([1, 2, 3], 2) => [3]""")(base.drop)
    put('dropRight', docs="""All but the last n elements.

            ex: dropRight([1, 2, 3], 2) => [1]""")(base.drop_right)
    put('take')(base.take)
    put('takeRight')(base.take_right)
    put('at')(base.at)
    # }}}
    # Sets and shapes {{{
    put('merge')(shape.merge)
    put('uniq', 'unique')(shape.uniq)
    put('union', docs="""Every distinct element of the given lists, first
            occurrence first.

            ex: union([1, 2], [2, 3]) => [1, 2, 3]""")(shape.union)
    put('intersection')(shape.intersection)
    put('difference')(shape.difference)
    put('flatten')(shape.flatten)
    put('flattenDeep', docs="""Remove every level of nesting.

            ex: flattenDeep([1, [2, [3, [4]]]]) => [1, 2, 3, 4]""")(shape.flatten_deep)
    put('flattenDepth', docs="""Remove up to n levels of nesting.""")(shape.flatten_depth)
    put('hasDepth')(shape.has_depth)
    put('depth')(shape.depth)
    put('zip', docs="""Transpose the given lists into a list of columns,
            padding short ones with None. Fails without arguments.

            ex: zip([1, 2], ["a", "b"]) => [[1, "a"], [2, "b"]]""")(shape.zip_)
    put('unzip')(shape.unzip)
    put('pluck')(shape.pluck)
    put('compact')(shape.compact)
    # }}}
    # Mutation {{{
    put('push')(assign.push)
    put('pop')(assign.pop)
    put('shift')(assign.shift)
    put('unshift', docs="""Put an element at the front of a bound list.
            Returns the new list.""")(assign.unshift)
    put('splice')(assign.splice)
    put('remove')(assign.remove)
    put('pull')(assign.pull)
    put('fill')(assign.fill)
    # }}}
    # Values {{{
    put('empty')(string.empty)
    put('isBoolean')(num.is_boolean)
    put('inRange', docs="""Whether a number lies in [start, stop).

            ex: inRange(7, 5, 10) => True""")(num.in_range)
    put('startsWith', docs="""Whether a string starts with the given characters.""")(string.starts_with)
    put('endsWith', docs="""Whether a string ends with the given characters.""")(string.ends_with)
    put('contains')(string.contains)
    # }}}

    logger.debug('registered %d builtins', len(env.procedures()))

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
