"""Ready-made stages for collection inputs."""

from typing import Any, Callable


def filter_stage(predicate: Callable[[Any], Any]) -> Callable[[Any], list]:
    """Stage keeping the items for which predicate is truthy."""

    def stage(items):
        return [item for item in items if predicate(item)]

    stage.__name__ = stage.__qualname__ = f"filter({getattr(predicate, '__name__', 'predicate')})"
    return stage


def map_stage(fn: Callable[[Any], Any]) -> Callable[[Any], list]:
    """Stage applying fn to every item."""

    def stage(items):
        return [fn(item) for item in items]

    stage.__name__ = stage.__qualname__ = f"map({getattr(fn, '__name__', 'fn')})"
    return stage
