# scooter_rentals/errors.py


class ManagementError(Exception):
    """A ledger operation was rejected. The ledger is left untouched."""


class InsufficientWorkingScooters(ManagementError):
    pass


class InsufficientBrokenScooters(ManagementError):
    pass


class InsufficientParts(ManagementError):
    pass


class NotEnoughMoney(ManagementError):
    pass


class InvalidParameter(ManagementError):
    pass


class UnaccountedConditionsError(RuntimeError):
    """A temperature/weather pairing with no demand entry reached the rental model."""
