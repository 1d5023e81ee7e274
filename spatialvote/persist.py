'''Serialization of Spatialvote objects to JSON-ready dictionaries.

Evaluators, converters, rank scorers and voting systems decorated with
:func:`simple_serialization` get a ``to_dict()`` method that records their
class and constructor parameters. Election results and input entities
(dataclasses) serialize their fields; results add the winner label for the
presentation layer.

Only the output direction is provided; the dictionaries are meant for
display and export (e.g. the JSON output of the command line tool).
'''

import inspect
import dataclasses
from typing import Any, List, Dict


ATOMIC_TYPES = (str, int, float, bool, type(None))


def simple_serialization(class_: type) -> type:
    '''A decorator to provide a simple to_dict() serialization method.

    The resulting method will serialize all object attributes corresponding
    to the class's constructor parameter names. Therefore, this decorator
    is only useful when the class stores all its original parameters
    unchanged.

    :param class_: The class to add the method to.
    '''
    param_names = constructor_params(class_)

    def to_dict(self) -> Dict[str, Any]:
        out_dict = {'class': scoped_class_name(self)}
        for attr in param_names:
            out_dict[attr] = serialize_value(getattr(self, attr))
        return out_dict

    class_.to_dict = to_dict
    return class_


def constructor_params(class_: type) -> List[str]:
    # classes without their own constructor inherit object's (*args, **kwargs)
    if class_.__init__ is object.__init__:
        return []
    return [
        name for name in inspect.signature(class_.__init__).parameters
        if name != 'self'
    ]


def serialize_value(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    elif isinstance(value, ATOMIC_TYPES):
        return value
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: serialize_value(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    elif hasattr(value, 'items'):
        return {str(key): serialize_value(val) for key, val in value.items()}
    elif hasattr(value, '__iter__'):
        return [serialize_value(val) for val in value]
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def to_dict(obj: Any) -> Any:
    """Serialize an evaluator, system or result to a JSON-ready value.

    :param obj: An evaluator-like object providing a `to_dict()` method,
        a result dataclass, or a mapping or sequence of those.
    """
    return serialize_value(obj)


def scoped_class_name(value: Any) -> str:
    cls = value.__class__
    return '.'.join((cls.__module__, cls.__name__))
