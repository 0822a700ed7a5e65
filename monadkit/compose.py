from functools import reduce


def compose(*funcs):
    """compose(f, g, h)(x) == f(g(h(x)))"""
    return reduce(lambda f, g: lambda x: f(g(x)), funcs)


def pipe(*funcs):
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs)


def identity(value):
    return value


def flip(fn):
    """flip(f)(a, b) == f(b, a)"""
    return lambda a, b: fn(b, a)


def noop(*_):
    return None


def always_false(*_):
    return False
