# hotel_search/services/errors.py


class HotelSearchError(Exception):
    """Base class for errors raised by the search core."""


class StoreError(HotelSearchError):
    """
    The store could not be reached or a query failed.
    Fatal for the whole search; the driver error is chained as __cause__.
    """


class NoMatchError(HotelSearchError):
    """
    A single hotel does not satisfy the filter (no qualifying room, or out of range).
    Only meaningful per hotel; the search loop turns it into a skip.
    """

    def __init__(self, message: str, hotel_id: int | None = None):
        super().__init__(message)
        self.hotel_id = hotel_id
