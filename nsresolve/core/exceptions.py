"""nsresolve custom exceptions."""


class NsResolveError(Exception):
    """Base exception for nsresolve errors."""


class NameRequiredError(NsResolveError):
    """A namespace was constructed without a name."""


class UnknownSymbolError(NsResolveError):
    """Class short name not owned by the namespace."""


class UnknownNamespaceError(NsResolveError):
    """Child namespace not owned by the namespace."""


class ConfigError(NsResolveError):
    """Configuration file is malformed."""
