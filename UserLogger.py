import sys
import time
from enum import Enum


class Verbosity(Enum):
    ERROR = "error"
    WARNING = "warning"
    DEBUG = "debug"

    @staticmethod
    def from_string(value):
        """Parse a verbosity name such as 'debug' or 'Warning'"""
        if isinstance(value, Verbosity):
            return value
        for verbosity in Verbosity:
            if str(value).strip().lower() == verbosity.value:
                return verbosity
        allowed = ", ".join(verbosity.value for verbosity in Verbosity)
        raise ValueError(f"Unknown verbosity '{value}', expected one of: {allowed}")


class UserLogger:
    """
    Prints messages for the user, filtered by verbosity.
    Errors always go to stderr, warnings are shown unless only errors are
    requested, debug messages only at debug verbosity.
    """

    def __init__(self, verbosity=Verbosity.WARNING):
        self.verbosity_ = Verbosity.from_string(verbosity)

    def get_verbosity(self):
        return self.verbosity_

    def error(self, message):
        print(f"Error: {message}", file=sys.stderr)

    def warning(self, message):
        if self.verbosity_ in (Verbosity.WARNING, Verbosity.DEBUG):
            print(f"Warning: {message}")

    def debug(self, message):
        if self.verbosity_ == Verbosity.DEBUG:
            print(message)

    def __repr__(self):
        return f"UserLogger(verbosity='{self.verbosity_.value}')"


class PerformanceTimer:
    def __init__(self, logger=None):
        self.myStartTimer_ = 0.0
        self.myEndTimer_ = 0.0
        self.myEventName_ = None
        self.logger_ = logger if logger is not None else UserLogger()

    def start_timer(self, eventName):
        self.myEventName_ = eventName
        self.myStartTimer_ = time.perf_counter()

    def end_timer(self):
        """Stop the running event, report it at debug level and return the elapsed seconds"""
        assert self.myEventName_ is not None, "No event was started"
        self.myEndTimer_ = time.perf_counter()
        elapsed = self.myEndTimer_ - self.myStartTimer_
        self.logger_.debug(f"For event {self.myEventName_}, timer: {elapsed:.6f} seconds ")
        self.myEventName_ = None
        return elapsed
