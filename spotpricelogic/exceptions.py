class SPLError(Exception): ...


class SeriesError(SPLError): ...


class WindowError(SPLError): ...


class IngestError(SPLError): ...


class ProviderError(SPLError): ...


class ConfigError(SPLError): ...


def require(condition: bool, message: str, exc: type[SPLError] = SPLError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
