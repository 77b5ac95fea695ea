

class ResolverError(RuntimeError):
	"""Base exception for resolver-related errors."""


class InvalidConfiguration(ResolverError):
	"""Raised when a resolver or its configuration is built from invalid parts."""


class ResolverNotInitializedError(ResolverError):
	"""Raised when the global store is used before ResolverConfig.init()."""


__all__ = ["ResolverError", "InvalidConfiguration", "ResolverNotInitializedError"]