""" hand-drawn curves traced by a chain of rotating arrows (Fourier epicycles) """

__version__ = "0.1.0"
