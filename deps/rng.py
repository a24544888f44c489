import random

_rng = random.Random()


def get_rng() -> random.Random:
    """Random source for topic/template picks; tests override this dependency."""
    return _rng
