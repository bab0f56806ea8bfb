# coding: utf-8
import dataclasses
import inspect
from dataclasses import dataclass, field
from typing import (
        Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union,
        )
from underdash.logger import logger

# Callables, scopes and the invoker: the runtime every operation is built on.

class _Missing:
    def __repr__(self) -> str:
        return '<missing>'

MISSING: Any = _Missing()

# outcomes {{{
# Every invocation completes with exactly one of these. Bodies signal by
# returning one; any other return value is a Normal completion.
@dataclass(frozen=True)
class Normal:
    value: Any = None

@dataclass(frozen=True)
class EarlyReturn:
    value: Any = None

@dataclass(frozen=True)
class LoopBreak:
    value: Any = None

@dataclass(frozen=True)
class LoopContinue:
    value: Any = None

@dataclass(frozen=True)
class Failure:
    message: str
    origin: str = ''
    depth: int = 0
    hops: int = 0
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)

Outcome = Union[Normal, EarlyReturn, LoopBreak, LoopContinue, Failure]
OUTCOME_TYPES = (Normal, EarlyReturn, LoopBreak, LoopContinue, Failure)
# }}}
# exceptions {{{
class UnderdashError(Exception): pass
class InvalidArgument(UnderdashError, ValueError): pass
class EmptyInput(UnderdashError, ValueError): pass
class UndefinedName(UnderdashError, NameError): pass

class CallableFailure(UnderdashError):
    """An invoked callable failed. str() is the original message."""
    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure

class EarlyExit(Exception):
    """Carries a control signal (early return, break, continue) up through
    the Python stack until an invoke() turns it back into an outcome. Not an
    error."""
    def __init__(self, outcome: Outcome) -> None:
        super().__init__(type(outcome).__name__)
        self.outcome = outcome
# }}}
# scopes {{{
class Cell:
    __slots__ = ('value',)
    def __init__(self, value: Any = MISSING) -> None:
        self.value = value
    def __repr__(self) -> str:
        return '<Cell {!r}>'.format(self.value)

class Scope:
    """Named bindings held in cells, so two scopes can share one binding."""
    def __init__(self) -> None:
        self.vars: Dict[str, Cell] = dict()

    def cell(self, name: str, create: bool = False) -> Optional[Cell]:
        ret = self.vars.get(name)
        if ret is None and create:
            ret = self.vars[name] = Cell()
        return ret

    def get_or_none(self, name: str) -> Any:
        return self.get_or_else(name, None)

    def get(self, name: str) -> Any:
        c = self.vars.get(name)
        if c is None or c.value is MISSING:
            raise UndefinedName('can\'t read "{}": no such variable'.format(name))
        return c.value

    def get_or_else(self, name: str, other: Any) -> Any:
        c = self.vars.get(name)
        if c is None or c.value is MISSING: return other
        else: return c.value

    def put(self, name: str, val: Any) -> None:
        self.cell(name, create=True).value = val # type: ignore

    def __contains__(self, name: str) -> bool:
        c = self.vars.get(name)
        return c is not None and c.value is not MISSING

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, val: Any) -> None:
        self.put(name, val)

class Frame(Scope):
    """The fresh scope of one block invocation.

    Nothing falls through to any other scope. A block body that wants to
    read or write a variable of the scope it was defined in asks for it
    explicitly with upvar(), after which the local name and the outer one
    share a cell.
    """
    def __init__(self, owner: 'Invocable', outer: Optional[Scope] = None) -> None:
        super().__init__()
        self.owner = owner
        self.outer = outer
        self.depth: int = (outer.depth if isinstance(outer, Frame) else 0) + 1

    def upvar(self, *names: str) -> None:
        if self.outer is None:
            raise UnderdashError('no enclosing scope to bind "{}" in'.format(
                ' '.join(names)))
        for name in names:
            self.vars[name] = self.outer.cell(name, create=True) # type: ignore

    def __repr__(self) -> str:
        return '<Frame depth={} vars={}>'.format(self.depth, sorted(self.vars))

class Environment(Scope):
    """The root scope, holding named procedures with their docs."""
    def __init__(self) -> None:
        super().__init__()
        self.var_docs:      Dict[str, str] = dict()
        self.var_stability: Dict[str, str] = dict()

    def put(self, name: str, val: Any, # type: ignore
            docs: Optional[str] = None,
            stability: Optional[str] = None,
            fail_if_overwrite: bool = False) -> None:
        if fail_if_overwrite and name in self:
            raise AssertionError('Failing on overwriting ' + repr(name))
        super().put(name, val)
        if docs is not None:
            self.var_docs[name] = docs
        if stability is not None:
            self.var_stability[name] = stability

    def procedures(self) -> Dict[str, 'Invocable']:
        return {name: c.value for name, c in self.vars.items()
                if isinstance(c.value, Invocable)}
# }}}
# Invocable, Procedure, BuiltIn, Block {{{
# Probably un-Pythonic superclass to allow isinstance and mypy tests:
class Invocable:
    name = '<invocable>'
    depth = 1
    def run(self, args: Sequence[Any]) -> Any:
        raise NotImplementedError
    def __call__(self, *args: Any) -> Any:
        return yield_(self, *args)

class Procedure(Invocable):
    """A named procedure. Calling one is a boundary: an early return raised
    out of anything its body calls becomes its own return value."""
    boundary = True

    def __init__(self,
            name: str,
            func: Callable[..., Any],
            aliases: Optional[List[str]] = None,
            docs: Optional[str] = None,
            stability: str = "unknown") -> None:
        self.name = name
        self.aliases: List[str] = aliases or [name]
        self.func = func
        self.docs = docs if docs is not None else inspect.getdoc(func)
        self.stability = stability

    def run(self, args: Sequence[Any]) -> Any:
        try:
            return self.func(*args)
        except EarlyExit as ex:
            if not self.boundary: raise
            outcome = ex.outcome
            if isinstance(outcome, EarlyReturn):
                logger.debug('%s: early return absorbed with %r', self.name, outcome.value)
                return outcome.value
            kind = 'break' if isinstance(outcome, LoopBreak) else 'continue'
            raise UnderdashError('invoked "{}" outside of a loop'.format(kind))

    def __repr__(self) -> str:
        return '<{} {}>'.format(type(self).__name__, self.name)

class BuiltIn(Procedure):
    """A library operation. Transparent to every signal."""
    boundary = False

class Function(Procedure):
    """A plain Python callable used as an anonymous block. Transparent like
    a BuiltIn, so it can forward a block or nest operations without eating
    their signals. Only procedure() and define() make boundaries."""
    boundary = False

ParamSpec = Union[str, Iterable[Union[str, Tuple[str, Any]]]]

class Block(Invocable):
    """An anonymous block: parameter names, a body and the scope it was
    written in.

    params is a whitespace-separated string or a list whose entries are
    names or (name, default) pairs. A last parameter named "args" collects
    the remaining arguments. The body is called as body(frame, *values).
    """
    name = 'block'

    def __init__(self, params: ParamSpec, body: Callable[..., Any],
            scope: Optional[Scope] = None) -> None:
        if isinstance(params, str): params = params.split()
        self.params: List[Tuple[str, Any]] = [
                (p, MISSING) if isinstance(p, str) else (p[0], p[1])
                for p in params]
        self.variadic = bool(self.params) and self.params[-1][0] == 'args'
        self.body = body
        self.scope = scope

    @property
    def depth(self) -> int: # type: ignore
        return (self.scope.depth if isinstance(self.scope, Frame) else 0) + 1

    def fixed_params(self) -> List[Tuple[str, Any]]:
        return self.params[:-1] if self.variadic else self.params

    def usage(self) -> str:
        words = ['block']
        for name, default in self.fixed_params():
            words.append(name if default is MISSING else '?' + name + '?')
        if self.variadic: words.append('?arg ...?')
        return 'wrong # args: should be "{}"'.format(' '.join(words))

    def bind(self, args: Sequence[Any]) -> List[Tuple[str, Any]]:
        fixed = self.fixed_params()
        if len(args) > len(fixed) and not self.variadic:
            raise InvalidArgument(self.usage())
        bound = []
        for i, (name, default) in enumerate(fixed):
            if i < len(args):
                bound.append((name, args[i]))
            elif default is not MISSING:
                bound.append((name, default))
            else:
                raise InvalidArgument(self.usage())
        return bound

    def run(self, args: Sequence[Any]) -> Any:
        frame = Frame(self, self.scope)
        bound = self.bind(args)
        for name, val in bound:
            frame.put(name, val)
        rest = list(args[len(bound):])
        if self.variadic:
            frame.put('args', rest)
        return self.body(frame, *[val for _, val in bound], *rest)

    def __repr__(self) -> str:
        return '<Block {}>'.format(' '.join(name for name, _ in self.params))

def block(body: Callable[..., Any], scope: Optional[Scope] = None) -> Block:
    """Make a Block whose parameters are read off body's signature (after
    the leading frame parameter)."""
    params: List[Union[str, Tuple[str, Any]]] = []
    for param in list(inspect.signature(body).parameters.values())[1:]:
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            params.append('args')
        elif param.default is not inspect.Parameter.empty:
            params.append((param.name, param.default))
        else:
            params.append(param.name)
    return Block(params, body, scope)

def procedure(func: Callable[..., Any]) -> Procedure:
    return Procedure(func.__name__, func)
# }}}
# classification {{{
_default_environment: Optional[Environment] = None

def default_environment() -> Environment:
    global _default_environment
    if _default_environment is None:
        from underdash.builtins import initialize_builtins
        env = Environment()
        initialize_builtins(env)
        _default_environment = env
    return _default_environment

def define(name: str, func: Callable[..., Any], docs: Optional[str] = None) -> Procedure:
    """Register a named procedure in the default environment."""
    proc = func if isinstance(func, Procedure) else Procedure(name, func, docs=docs)
    default_environment().put(name, proc, docs=proc.docs)
    return proc

def as_callable(value: Any, env: Optional[Environment] = None) -> Invocable:
    # Decided by type alone, never by the value's shape.
    if isinstance(value, Invocable):
        return value
    elif isinstance(value, str):
        target = (env or default_environment()).get_or_none(value)
        if not isinstance(target, Invocable):
            raise UndefinedName('invalid command name "{}"'.format(value))
        return target
    elif callable(value):
        return Function(getattr(value, '__name__', '<callable>'), value, docs='')
    else:
        raise InvalidArgument('cannot invoke ' + repr(value))
# }}}
# invoker {{{
def relay(outcome: Outcome) -> Outcome:
    """Carry an outcome one invocation level up. Failures are re-anchored at
    the new level; every other outcome travels as the very same object."""
    if isinstance(outcome, Failure):
        return dataclasses.replace(outcome, hops=outcome.hops + 1)
    return outcome

def invoke(func: Any, *args: Any) -> Outcome:
    try:
        invocable = as_callable(func)
    except UnderdashError as ex:
        return relay(Failure(str(ex), repr(func), error=ex))
    try:
        ret = invocable.run(args)
    except EarlyExit as ex:
        return relay(ex.outcome)
    except CallableFailure as ex:
        return relay(ex.failure)
    except Exception as ex:
        logger.debug('%s failed at depth %d: %s', invocable.name, invocable.depth, ex)
        return relay(Failure(str(ex), invocable.name, invocable.depth, error=ex))
    if isinstance(ret, OUTCOME_TYPES):
        return relay(ret)
    return Normal(ret)

def unwrap(outcome: Outcome) -> Any:
    """Re-raise an outcome in the current frame: a Normal gives its value,
    anything else unwinds to the next invoke() up."""
    if isinstance(outcome, Normal):
        return outcome.value
    elif isinstance(outcome, Failure):
        raise CallableFailure(outcome) from outcome.error
    else:
        raise EarlyExit(outcome)

def yield_(func: Any, *args: Any) -> Any:
    return unwrap(invoke(func, *args))
# }}}

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
