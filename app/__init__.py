"""Transaction relay: records transactions in Firebase and notifies devices."""

__version__ = "0.1.0"
