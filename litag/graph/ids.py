from ..errors import InvalidId


def parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidId("invalid id: {!r}".format(value))
