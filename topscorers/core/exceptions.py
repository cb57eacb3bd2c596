"""TopScorers exception hierarchy."""


class TopScorersError(Exception):
    """Base exception for all TopScorers errors."""


class StoreError(TopScorersError):
    """The score store could not complete an operation."""
