"""Provide insights about Python objects."""

import functools
import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Used to describe the callables that are provided
    to the dataframe transformations, like the predicate
    of a ``select`` or the reducer of a ``summarize``.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'numframe.utils.inspect.TestClass.method'
    >>> get_qualname(lambda row: True)
    'numframe.utils.inspect.<lambda>'
    """
    if isinstance(obj, functools.partial):
        return f"partial({get_qualname(obj.func)})"

    module = inspect.getmodule(obj)
    module_name = module.__name__ if module is not None else type(obj).__module__
    if inspect.ismethod(obj):
        class_name = obj.__self__.__class__.__name__
        return f"{module_name}.{class_name}.{obj.__name__}"
    elif inspect.isfunction(obj) or inspect.isbuiltin(obj):
        return f"{module_name}.{obj.__qualname__}"
    elif inspect.isclass(obj):
        return f"{module_name}.{obj.__name__}"
    return f"{module_name}.{obj.__class__.__name__}"
