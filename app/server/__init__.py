from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ip-lookup-service")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "unknown"
