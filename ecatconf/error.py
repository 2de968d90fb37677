"""Ecatconf exceptions."""


class EcatConfError(Exception):

    """Base class for all ecatconf errors."""


class IntrospectionError(EcatConfError):

    """Querying the bus introspection tool failed. Aborts the whole run since
    a live bus is expected to answer every request.
    """


class RegisterValueError(IntrospectionError):

    """Register upload returned something which is not a number."""
