class CommentQueryError(Exception):
    pass


class StoreUnavailable(CommentQueryError):
    """The comment store could not be reached or did not answer in time."""


class InvalidPageRequest(CommentQueryError, ValueError):
    """Page index below zero or page size below one."""
