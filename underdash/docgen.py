from typing import Any, Dict, List
from underdash.objects import Environment, Invocable
import string

introduction = """
*Small, composable list utilities with blocks that can break your loop.*

Underdash is a functional-utility library in the lineage of lodash: maps,
folds, filters, slices, set operations and the like over plain Python
lists. Every higher-order operation takes a *callable*, which is one of

-   the name of a registered procedure, such as `"first"`;
-   a plain Python function or lambda;
-   a `Block`, an anonymous block with named parameters and the scope it
    was written in.

Example:

    >>> from underdash import map_, reduce
    >>> map_([1, 2, 3], lambda x: x * x)
    [1, 4, 9]
    >>> reduce([2, 4, 6, 8, 10], lambda a, b: a + b)
    30

### Signals

A callable completes normally by returning a value. It can instead return
one of the outcome objects to steer the operation that invoked it:

-   `LoopBreak(value)` stops the operation's loop. `map` then returns the
    break's value instead of the list built so far.
-   `LoopContinue(value)` skips to the next element.
-   `EarlyReturn(value)` unwinds through every operation between the block
    and the nearest enclosing procedure, which returns `value`.

Exceptions raised by a callable surface as `CallableFailure`, carrying the
original message.

### Blocks and scopes

A block runs in a fresh frame that sees nothing of the code around it
except what it asks for by name with `frame.upvar(name)`. After that, reads
and writes of the name go to the scope the block was written in.

    >>> scope = Scope()
    >>> scope['total'] = 0
    >>> def add(frame, x):
    ...     frame.upvar('total')
    ...     frame['total'] += x
    >>> each([1, 2, 3], Block('x', add, scope))
    [1, 2, 3]
    >>> scope['total']
    6
"""

stability_text = """
Each built-in has a stability rating, one of "unstable", "alpha", "beta",
"stable". Anything that isn't stable may still change its argument order or
edge-case behavior.
"""

name_template = """<a href="#{{id}}"><code>{{ name }}</code></a>"""

docs_template = """
{% for par in pars %}
<{{ par.tag }} class="{{ par.cls }}">{{ par.text }}</{{ par.tag }}>
{% endfor %}
"""

template = """
<html lang="en">
<head>
<meta charset="utf-8">
<title>Underdash Built-Ins</title>
<style>
body { font-family: sans-serif; margin: 0; background-color: #eee; }
.wrap { background-color: #fff; margin-left: auto; margin-right: auto; padding: 1em; max-width: 48em; }
h2 { padding-top: 0.5em; border-top: 3px double black; }
h3 { border-top: 1px dashed black; padding-top: 0.5em; }
h3.name { font-family: monospace; }
h3 a { text-decoration: none; }
pre { border: 1px solid #ac9; background-color: #eeffcc; padding: 0.2em; }
pre, code { white-space: pre-wrap; overflow-wrap: break-word; }
pre.ex::before, pre.exs::before { font-size: 75%; font-family: sans-serif; }
pre.ex::before { content: "Example: "; }
pre.exs::before { content: "Examples: "; display: block; }
p.const { border: 1px solid #ccc; background-color: #eee; padding: 0.2em; }

p.aliases, p.stability { font-style: italic; margin-left: 2.5em; }
p.aliases a { text-decoration: none; }
p.unstable { color: #c00; }
p.alpha { color: #c60; }
p.beta { color: #088; }
p.stable { color: #0a0; }
</style>
</head>
<body>
<div class="wrap">
<h1>Underdash Documentation and Built-Ins</h1>
<strong>Version {{ version }}</strong>
<h2>Table of Contents</h2>
<ul>
<li><a href="#GIntroduction">Introduction</a></li>
<li><a href="#GStability">Stability</a></li>
<li><a href="#GV">Built-Ins</a></li>
</ul>

<h2 id="GIntroduction">Introduction</h2>
{{ introduction }}
<h2 id="GStability">Stability</h2>
{{ stability }}

<h2 id="GV">Built-Ins</h2>
{% for var in vars %}
<h3 id="{{ var.name|bid }}" class="name">{{ var.name|b }}</h3>
<p class="stability {{ var.stability }}">Stability: {{ var.stability }}</p>
{% if var.aliases %}
<p class="aliases">Aliases:
{% for alias in var.aliases -%}
{{ alias|b }}{%- if not loop.last -%}, {% endif -%}
{%- endfor %}
</p>
{% endif %}
{{ var.docs }}
{% if var.type %}
<p class="const">{{ var.type }} constant with value <code>{{ var.value }}</code></p>
{% endif %}
{% endfor %}
</div>
</body>
</html>
"""

safe_id_chars = string.ascii_letters + string.digits
def mangle_to_id(id_prefix: str, name: str) -> str:
    acc: List[str] = [id_prefix, '_']
    for c in name:
        if c in safe_id_chars:
            acc.append(c)
        elif c == '_':
            acc.append('__')
        else:
            acc.append('_' + hex(ord(c))[2:] + '_')
    ret = ''.join(acc)
    if ret.endswith('_'): ret = ret[:-1]
    return ret

def document(env: Environment) -> str:
    """Render the HTML reference for everything bound in env."""
    import jinja2
    from markupsafe import Markup
    from markdown import markdown
    from underdash.__version__ import version

    jenv = jinja2.Environment(autoescape=True)
    name_jt = jenv.from_string(name_template)

    def link_builtin(name: str) -> Markup:
        return Markup(name_jt.render({'id': mangle_to_id('V', name), 'name': name}))

    jenv.filters['b'] = link_builtin
    jenv.filters['bid'] = lambda name: mangle_to_id('V', name)

    docs_jt = jenv.from_string(docs_template)
    main_jt = jenv.from_string(template)

    def render_docs(docs: str) -> Markup:
        render_pars = []
        for par0 in docs.split('\n\n'):
            text = par0.strip()
            if not text: continue
            tag = "p"
            cls = ""
            if text.startswith('ex:'):
                tag = "pre"
                lines = text[3:].splitlines()
                cls = 'exs' if len(lines) > 1 else 'ex'
                text = '\n'.join(s.strip() for s in lines)
            render_pars.append({'tag': tag, 'cls': cls, 'text': text})
        return Markup(docs_jt.render({'pars': render_pars}))

    data: List[Dict[str, Any]] = []
    for name in sorted(env.vars):
        obj = env.get_or_none(name)
        if obj is None: continue
        aliases = [alias for alias in getattr(obj, 'aliases', []) if alias != name]
        docs = getattr(obj, 'docs', None) or env.var_docs.get(name) or ''
        stability = getattr(obj, 'stability', None) or env.var_stability.get(name) or 'unknown'
        if stability not in ('unstable', 'alpha', 'beta', 'stable'):
            stability = 'unstable'

        datum: Dict[str, Any] = {
            'name': name,
            'stability': stability,
            'docs': render_docs(docs),
            'aliases': aliases,
        }
        if not isinstance(obj, Invocable):
            datum['type'] = type(obj).__name__.capitalize(); datum['value'] = repr(obj)
        data.append(datum)

    return main_jt.render({
        'version': version,
        'introduction': Markup(markdown(introduction)),
        'stability': Markup(markdown(stability_text)),
        'vars': data,
    })

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
