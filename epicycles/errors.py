""" errors raised by the numerical pipeline and the player; the session absorbs all of them """


class EpicycleError(Exception):
    """ base class for everything raised by this package """


class InsufficientInputError(EpicycleError):
    """ fewer than two points were drawn """


class DegeneratePathError(EpicycleError):
    """ the path has zero arc length, so it cannot be resampled """


class EmptyAnimationError(EpicycleError):
    """ playback was started before any frames were computed """
