class DispatchError(Exception):
    """Base class for errors raised while dispatching a clinician."""


class NoClinicianAvailable(DispatchError):
    """The clinician roster is empty."""


class NoLabAvailable(DispatchError):
    """A lab drop-off was requested but there are no labs to route through."""


class GeocodeFailure(DispatchError):
    """The patient address could not be resolved to coordinates."""


class RosterLoadError(DispatchError):
    """The roster data source could not be read."""
