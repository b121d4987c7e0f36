import functools

from sharevault.errors import ReentrantCall


def nonreentrant(func):
    """
    Per-instance reentrancy barrier.

    The flag is set before the body runs and cleared on the way out, so any
    nested attempt to enter a guarded method of the same contract while an
    outer one is in flight (e.g. from an asset transfer hook) fails at once.
    All guarded methods of one contract share the flag.
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if getattr(self, "_entered", False):
            raise ReentrantCall(f"reentrant call to {func.__name__}")
        self._entered = True
        try:
            return func(self, *args, **kwargs)
        finally:
            self._entered = False

    return wrapper
