from typing import Union


def format_number(x: Union[int, float]) -> str:
    """Render whole numbers without a trailing '.0'; keep other values as given"""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)
