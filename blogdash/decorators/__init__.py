from blogdash.decorators.metrics import timed

__all__ = ["timed"]
